"""Tests for the per-page-type heuristic extractors."""

import pytest

from company_crawler.crawler.extractor import ContentExtractor
from company_crawler.extract import (
    EXTRACTORS,
    extract_company_info,
    extract_customer_info,
    extract_financial_info,
    extract_media_info,
    extract_page,
    extract_pricing_info,
    extract_product_info,
    extract_team_info,
)
from company_crawler.extract.patterns import all_facts, first_fact
from company_crawler.models import CrawledData, PageType


def soup_for(html):
    return ContentExtractor().strip(html)


class TestFactPatterns:
    """Tests for the labeled regex table."""

    def test_founded_priority(self):
        text = "Serving customers since 1999. Acme was founded in 2001."
        assert first_fact("founded", text) == "2001"

    def test_headquarters(self):
        assert first_fact("headquarters", "We are headquartered in Austin, Texas.") == "Austin"

    def test_based_in_requires_capital(self):
        assert first_fact("headquarters", "We are based in the cloud.") is None
        assert first_fact("headquarters", "We are based in Berlin.") == "Berlin"

    def test_team_size(self):
        assert first_fact("team_size", "Over 1,200+ employees worldwide") == "1,200+"

    def test_prices(self):
        text = "Starter $9/mo, Pro $49 / month, Enterprise $1,200.00/year"
        assert all_facts("price", text) == ["$9/mo", "$49 / month", "$1,200.00/year"]

    def test_money_facts(self):
        assert all_facts("funding", "We raised $45 million last year") == ["raised $45 million"]
        assert all_facts("valuation", "valuation of $1.2B") == ["valuation of $1.2B"]

    def test_no_match(self):
        assert first_fact("founded", "nothing here") is None
        assert all_facts("revenue", "") == []


class TestCompanyInfo:
    """Tests for company overview extraction."""

    HTML = """
    <html><head>
      <meta name="description" content="Acme builds widgets">
      <meta name="description" content="A second description">
    </head><body>
      <h1>Acme</h1>
      <h2>Our Mission</h2>
      <p>To make every widget on earth faster, cheaper and kinder to the planet.</p>
      <p>Acme was founded in 2012 and is headquartered in Austin, Texas.</p>
    </body></html>
    """

    def test_meta_description_first_wins(self):
        data = CrawledData()
        extract_company_info(soup_for(self.HTML), data)
        assert data.company_info.description == "Acme builds widgets"

    def test_second_call_does_not_overwrite(self):
        data = CrawledData()
        extract_company_info(soup_for(self.HTML), data)
        other = '<html><head><meta name="description" content="Something else"></head></html>'
        extract_company_info(soup_for(other), data)
        assert data.company_info.description == "Acme builds widgets"

    def test_mission_founded_headquarters(self):
        data = CrawledData()
        extract_company_info(soup_for(self.HTML), data)
        assert data.company_info.mission.startswith("To make every widget")
        assert data.company_info.founded == "2012"
        assert data.company_info.headquarters == "Austin"

    def test_og_description_fallback(self):
        html = '<html><head><meta property="og:description" content="OG text"></head><body></body></html>'
        data = CrawledData()
        extract_company_info(soup_for(html), data)
        assert data.company_info.description == "OG text"

    def test_paragraph_fallback(self):
        html = """
        <body><div>
          <h1>Acme</h1>
          <p>Short intro.</p>
          <p>Acme makes industrial widgets for factories all around the world.</p>
        </div></body>
        """
        data = CrawledData()
        extract_company_info(soup_for(html), data)
        assert data.company_info.description == (
            "Acme makes industrial widgets for factories all around the world."
        )

    def test_absent_data(self):
        data = CrawledData()
        extract_company_info(soup_for("<html><body></body></html>"), data)
        assert data.company_info.description == ""
        assert data.company_info.mission == ""


class TestTeamInfo:
    """Tests for leadership extraction."""

    HTML = """
    <body>
      <h2>Meet Our Team</h2>
      <div class="member">
        <h3>Jane Doe</h3>
        <p>CEO &amp; Co-founder</p>
        <p>Jane has spent twenty years building hardware companies on three continents.</p>
      </div>
      <div class="member">
        <h3>John Smith</h3>
        <p>Chief Technology Officer</p>
      </div>
      <div class="member"><h4>Jane Doe</h4><p>Founder</p></div>
      <div class="member"><p><strong>Sam Lee</strong>, VP Sales</p></div>
      <div class="values"><h3>Customer Obsession</h3><p>We listen first.</p></div>
      <p>We are a team of 45 people.</p>
    </body>
    """

    def test_leaders_extracted(self):
        data = CrawledData()
        extract_team_info(soup_for(self.HTML), data)
        leaders = {leader.name: leader for leader in data.team.leadership}
        assert set(leaders) == {"Jane Doe", "John Smith", "Sam Lee"}
        assert leaders["Jane Doe"].title == "CEO & Co-founder"
        assert leaders["Jane Doe"].bio.startswith("Jane has spent")
        assert leaders["John Smith"].title == "Chief Technology Officer"
        assert leaders["Sam Lee"].title == "VP Sales"

    def test_dash_separated_title(self):
        data = CrawledData()
        extract_team_info(soup_for("<body><div><b>Jane Doe</b> — CEO</div></body>"), data)
        assert data.team.leadership[0].title == "CEO"

    @pytest.mark.parametrize(
        "heading", ["Jane Doe — CEO", "Jane Doe – CEO", "Jane Doe - CEO", "Jane Doe, CEO"]
    )
    def test_title_inline_in_heading(self, heading):
        data = CrawledData()
        extract_team_info(soup_for(f"<body><div><h3>{heading}</h3></div></body>"), data)
        assert [(leader.name, leader.title) for leader in data.team.leadership] == [("Jane Doe", "CEO")]

    def test_inline_split_needs_title_keyword(self):
        data = CrawledData()
        extract_team_info(soup_for("<body><div><h3>Mary Anne — Portland</h3></div></body>"), data)
        assert data.team.leadership == []

    def test_title_keyword_is_whole_word(self):
        data = CrawledData()
        html = "<body><div><h3>Jane Doe</h3><p>Always ahead of the curve.</p><p>Cool ideas.</p></div></body>"
        extract_team_info(soup_for(html), data)
        assert data.team.leadership == []

    def test_section_heading_is_not_a_person(self):
        data = CrawledData()
        html = "<body><h2>Our Leadership</h2><p>Led by our CEO since day one.</p></body>"
        extract_team_info(soup_for(html), data)
        assert data.team.leadership == []

    def test_team_size(self):
        data = CrawledData()
        extract_team_info(soup_for(self.HTML), data)
        assert data.team.team_size == "45"

    def test_absent_data(self):
        data = CrawledData()
        extract_team_info(soup_for("<body><p>Nobody here</p></body>"), data)
        assert data.team.leadership == []
        assert data.team.team_size == ""


class TestProductInfo:
    """Tests for product extraction."""

    HTML = """
    <body>
      <div class="products">
        <div class="product-card">
          <h3>Widget Pro</h3>
          <p>Our flagship widget.</p>
          <ul><li>Fast</li><li>Cheap</li><li>Durable</li><li>Quiet</li><li>Green</li><li>Smart</li></ul>
        </div>
        <div class="product-card"><h3>Widget Lite</h3><p>Entry level.</p></div>
      </div>
      <div class="service-note">No heading here</div>
    </body>
    """

    def test_products_extracted(self):
        data = CrawledData()
        extract_product_info(soup_for(self.HTML), data)
        assert [p.name for p in data.products] == ["Widget Pro", "Widget Lite"]
        assert data.products[0].description == "Our flagship widget."
        assert data.products[0].features == ["Fast", "Cheap", "Durable", "Quiet", "Green"]
        assert data.products[1].features == []

    def test_absent_data(self):
        data = CrawledData()
        extract_product_info(soup_for("<body><p>Hi</p></body>"), data)
        assert data.products == []


class TestPricingInfo:
    """Tests for pricing extraction."""

    HTML = """
    <body>
      <h3>Pro</h3><p>$49/month</p><p>Billed annually</p>
      <h3>Enterprise</h3><p>Contact sales</p>
      <h3>About our plans</h3><p>Simple and fair.</p>
    </body>
    """

    def test_prices_and_tiers(self):
        data = CrawledData()
        extract_pricing_info(soup_for(self.HTML), data)
        assert "$49/month" in data.financial.pricing
        assert "Pro: $49/month Billed annually" in data.financial.pricing
        assert not any(p.startswith("Enterprise") for p in data.financial.pricing)

    def test_repeat_run_does_not_duplicate(self):
        data = CrawledData()
        extract_pricing_info(soup_for(self.HTML), data)
        count = len(data.financial.pricing)
        extract_pricing_info(soup_for(self.HTML), data)
        assert len(data.financial.pricing) == count


class TestCustomerInfo:
    """Tests for testimonials, case studies and logos."""

    HTML = """
    <body>
      <blockquote>Acme cut our widget costs in half within a single quarter.</blockquote>
      <p>— Maria Garcia, Globex</p>
      <blockquote><p>Best vendor we have worked with in years.</p><cite>Tom Baker</cite></blockquote>
      <p>"Their support team answered every question we had within minutes, every time."</p>
      <h2>Case Study: Globex</h2>
      <p>Globex rolled out Acme widgets across forty plants in six months and reduced
         downtime by a third while cutting maintenance spend substantially.</p>
      <img src="/img/globex-logo.png" alt="Globex">
      <img src="/img/hero.png" alt="Team photo">
      <img src="/img/logo.png" alt="Our logo">
    </body>
    """

    def test_testimonials(self):
        data = CrawledData()
        extract_customer_info(soup_for(self.HTML), data)
        testimonials = data.customers.testimonials
        assert [(t.author, t.company) for t in testimonials] == [
            ("Maria Garcia", "Globex"),
            ("Tom Baker", ""),
            ("Anonymous", ""),
        ]
        assert testimonials[1].quote == "Best vendor we have worked with in years."
        assert testimonials[2].quote.startswith("Their support team")

    def test_case_studies(self):
        data = CrawledData()
        extract_customer_info(soup_for(self.HTML), data)
        assert len(data.customers.case_studies) == 1
        assert data.customers.case_studies[0].startswith("Globex rolled out")

    def test_client_logos(self):
        data = CrawledData()
        extract_customer_info(soup_for(self.HTML), data)
        assert data.customers.client_logos == ["Globex"]


class TestMediaInfo:
    """Tests for press extraction."""

    def test_press_releases(self):
        html = """
        <body><div class="news-list">
          <article><h3>Acme raises Series B</h3><p>Acme announced new funding today.</p></article>
          <article><h3>Acme opens Berlin office</h3><p>The new office will host 50 engineers.</p></article>
        </div></body>
        """
        data = CrawledData()
        extract_media_info(soup_for(html), data)
        assert data.media.press_releases == [
            "Acme raises Series B: Acme announced new funding today.",
            "Acme opens Berlin office: The new office will host 50 engineers.",
        ]


class TestFinancialInfo:
    """Tests for investor page extraction."""

    def test_financial_figures(self):
        html = """
        <body>
          <p>Annual revenue: $120M in 2023.</p>
          <p>We raised $45 million in our Series C.</p>
          <p>Post-money valuation: $1.2B</p>
        </body>
        """
        data = CrawledData()
        extract_financial_info(soup_for(html), data)
        assert data.financial.revenue == ["revenue: $120M"]
        assert data.financial.funding == ["raised $45 million"]
        assert data.financial.valuation == ["valuation: $1.2B"]


class TestDispatch:
    """Tests for page type dispatch."""

    def test_every_page_type_has_extractors(self):
        assert set(EXTRACTORS) == set(PageType)

    def test_dispatch_by_type(self):
        data = CrawledData()
        extract_page(PageType.TEAM, soup_for("<body><h3>Jane Doe</h3><p>CEO</p></body>"), data)
        assert data.team.leadership[0].name == "Jane Doe"

    @pytest.mark.parametrize("page_type", list(PageType))
    @pytest.mark.parametrize("html", ["", "<html></html>", "<div><p>unclosed <b>tags"])
    def test_tolerates_missing_structure(self, page_type, html):
        data = CrawledData()
        extract_page(page_type, soup_for(html), data)
        assert data.products == []
        assert data.team.leadership == []
