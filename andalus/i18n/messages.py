"""Localized strings used by page payloads and metadata.

Only the handful of messages the service itself emits live here; the full
UI catalog belongs to the front end.
"""

MESSAGES: dict[str, dict[str, str]] = {
    "ar": {
        "site_name": "مكتبة الأندلس",
        "home.description": "مكتبة الأندلس - وجهتك الأولى للأدوات المكتبية والقرطاسية واللوازم المدرسية في السعودية.",
        "products.title": "منتجاتنا",
        "products.description": "تسوق من مجموعة واسعة من الأدوات المكتبية عالية الجودة في مكتبة الأندلس. أقلام، دفاتر، حقائب مدرسية، وأدوات تعليمية متنوعة بأسعار منافسة.",
        "products.no_results": "لم يتم العثور على منتجات",
        "product.discover": "اكتشف {name} بسعر {price} ريال سعودي في مكتبة الأندلس",
        "product.not_found.title": "المنتج غير موجود",
        "product.not_found.description": "لم يتم العثور على المنتج المطلوب",
        "product.error.title": "خطأ في تحميل المنتج",
        "product.error.description": "حدث خطأ أثناء تحميل بيانات المنتج",
        "locale.not_found": "الصفحة غير موجودة",
        "whatsapp.general": "مرحباً! أود الاستفسار عن منتجاتكم.",
        "whatsapp.help_choosing": "مرحباً! أحتاج مساعدة في اختيار المنتجات من مكتبتكم.",
        "whatsapp.buy": "مرحباً! أنا مهتم بشراء {name} (الكمية: {quantity})",
        "whatsapp.more_info": "مرحباً! أريد معلومات أكثر عن {name}",
    },
    "en": {
        "site_name": "Al-Andalus Library",
        "home.description": "Al-Andalus Library - your first destination for office supplies, stationery and school supplies in Saudi Arabia.",
        "products.title": "Our Products",
        "products.description": "Shop from a wide range of high-quality office supplies at Al-Andalus Library. Pens, notebooks, school bags, and various educational tools at competitive prices.",
        "products.no_results": "No products found",
        "product.discover": "Discover {name} for {price} SAR at Al-Andalus Library",
        "product.not_found.title": "Product Not Found",
        "product.not_found.description": "The requested product was not found.",
        "product.error.title": "Error Loading Product",
        "product.error.description": "An error occurred while loading product data.",
        "locale.not_found": "Page not found",
        "whatsapp.general": "Hello! I would like to ask about your products.",
        "whatsapp.help_choosing": "Hello! I need help choosing products from your library.",
        "whatsapp.buy": "Hello! I am interested in buying {name} (quantity: {quantity})",
        "whatsapp.more_info": "Hello! I would like more information about {name}",
    },
}


def translate(locale: str, key: str, **params: object) -> str:
    """Look up a message, falling back to English for unknown locales.

    Args:
        locale: Locale code.
        key: Message key.
        **params: Values substituted into the message.

    Returns:
        Formatted message.
    """
    catalog = MESSAGES.get(locale, MESSAGES["en"])
    message = catalog[key]
    return message.format(**params) if params else message
