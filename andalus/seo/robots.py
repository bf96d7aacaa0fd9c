"""robots.txt policy."""

from dataclasses import dataclass, field

DISALLOWED_PATHS = ["/private/", "/admin/"]


@dataclass(frozen=True)
class RobotsRule:
    """Crawl rule for one user agent."""

    user_agent: str
    allow: str = "/"
    disallow: list[str] = field(default_factory=lambda: list(DISALLOWED_PATHS))


def robots_rules() -> list[RobotsRule]:
    """Rules for all crawlers and for Googlebot."""
    return [RobotsRule("*"), RobotsRule("Googlebot")]


def render_robots_txt(base_url: str) -> str:
    """Render robots.txt.

    Args:
        base_url: Public site base URL used for the sitemap line.

    Returns:
        robots.txt content.
    """
    lines: list[str] = []
    for rule in robots_rules():
        lines.append(f"User-Agent: {rule.user_agent}")
        lines.append(f"Allow: {rule.allow}")
        lines.extend(f"Disallow: {path}" for path in rule.disallow)
        lines.append("")
    lines.append(f"Sitemap: {base_url}/sitemap.xml")
    return "\n".join(lines) + "\n"
