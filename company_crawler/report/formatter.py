"""Plain-text rendering of a crawl record for the analysis agents."""

from company_crawler.models import CrawledData

# Output-time caps, applied on top of the record's write-time caps
MAX_FINANCIAL_ITEMS = 5
MAX_LEADERS = 10
MAX_BIO_CHARS = 150
MAX_PRODUCTS = 5
MAX_TESTIMONIALS = 5
MAX_CASE_STUDIES = 3
MAX_CLIENT_LOGOS = 20
MAX_VIDEOS = 10
MAX_PRESS_RELEASES = 5
MAX_RAW_CHARS_PER_PAGE = 2000
MAX_REPORT_LENGTH = 30000

REPORT_HEADER = "=== ENHANCED WEB CRAWL DATA ==="


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def _company_overview(data: CrawledData) -> list[str]:
    info = data.company_info
    lines = []
    if info.description:
        lines.append(f"Description: {info.description}")
    if info.mission:
        lines.append(f"Mission/Vision: {info.mission}")
    if info.founded:
        lines.append(f"Founded: {info.founded}")
    if info.headquarters:
        lines.append(f"Headquarters: {info.headquarters}")
    return lines


def _financial(data: CrawledData) -> list[str]:
    lines = []
    for label, values in (
        ("Pricing", data.financial.pricing),
        ("Revenue", data.financial.revenue),
        ("Funding", data.financial.funding),
        ("Valuation", data.financial.valuation),
    ):
        if values:
            lines.append(f"{label}: {', '.join(values[:MAX_FINANCIAL_ITEMS])}")
    return lines


def _leadership(data: CrawledData) -> list[str]:
    team = data.team
    lines = []
    if team.team_size:
        lines.append(f"Team Size: {team.team_size} employees")
        if team.leadership:
            lines.append("")
    for leader in team.leadership[:MAX_LEADERS]:
        lines.append(f"• {leader.name} - {leader.title}")
        if leader.bio:
            lines.append(f"  {_truncate(leader.bio, MAX_BIO_CHARS)}")
    return lines


def _products(data: CrawledData) -> list[str]:
    lines = []
    for product in data.products[:MAX_PRODUCTS]:
        lines.append(f"\n### {product.name}")
        if product.description:
            lines.append(product.description)
        if product.features:
            lines.append("Key Features:")
            lines.extend(f"  • {feature}" for feature in product.features)
    return lines


def _testimonials(data: CrawledData) -> list[str]:
    lines = []
    for testimonial in data.customers.testimonials[:MAX_TESTIMONIALS]:
        attribution = testimonial.author
        if testimonial.company:
            attribution += f", {testimonial.company}"
        lines.append(f'\n"{testimonial.quote}"')
        lines.append(f"  — {attribution}")
    return lines


def _case_studies(data: CrawledData) -> list[str]:
    return [
        f"{index}. {study}\n"
        for index, study in enumerate(data.customers.case_studies[:MAX_CASE_STUDIES], 1)
    ]


def _clients(data: CrawledData) -> list[str]:
    logos = data.customers.client_logos[:MAX_CLIENT_LOGOS]
    return [", ".join(logos)] if logos else []


def _videos(data: CrawledData) -> list[str]:
    videos = data.media.videos[:MAX_VIDEOS]
    if not videos:
        return []
    return [f"Found {len(videos)} videos on the website"] + [f"• {video}" for video in videos]


def _press(data: CrawledData) -> list[str]:
    return [
        f"{index}. {release}\n"
        for index, release in enumerate(data.media.press_releases[:MAX_PRESS_RELEASES], 1)
    ]


def _raw_content(data: CrawledData) -> list[str]:
    lines = []
    for page_type, content in data.raw_content.items():
        if content:
            lines.append(f"\n### {page_type.upper()}")
            lines.append(_truncate(content, MAX_RAW_CHARS_PER_PAGE))
    return lines


SECTIONS = [
    ("COMPANY OVERVIEW", _company_overview),
    ("FINANCIAL INFORMATION", _financial),
    ("LEADERSHIP TEAM", _leadership),
    ("PRODUCTS & SOLUTIONS", _products),
    ("CUSTOMER TESTIMONIALS", _testimonials),
    ("CASE STUDIES", _case_studies),
    ("NOTABLE CLIENTS", _clients),
    ("VIDEO CONTENT", _videos),
    ("RECENT NEWS & PRESS", _press),
    ("RAW PAGE CONTENT", _raw_content),
]


def format_crawled_data_for_agents(data: CrawledData) -> str:
    """Render the crawl record as a bounded text report.

    Sections without data are left out. Long lists and page text are cut
    down again here so the report stays small no matter how much the crawl
    collected; the whole report never exceeds MAX_REPORT_LENGTH characters.
    """
    parts = [REPORT_HEADER]
    for title, render in SECTIONS:
        lines = render(data)
        if lines:
            parts.append(f"\n## {title}")
            parts.extend(lines)

    report = "\n".join(parts) + "\n"
    if len(report) > MAX_REPORT_LENGTH:
        report = report[:MAX_REPORT_LENGTH - 3] + "..."
    return report
