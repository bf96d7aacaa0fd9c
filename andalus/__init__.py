"""Al-Andalus Library catalog site.

Bilingual (Arabic/English) stationery catalog backed by a headless CMS,
with SEO metadata and WhatsApp ordering links.
"""

__version__ = "0.1.0"
