"""Tests for provider presenters."""

import json

import pytest

from gofritai.cli.presenters.providers import ProviderDetailPresenter, ProviderListPresenter
from gofritai.core.provider import Category


@pytest.mark.unit
class TestProviderListPresenter:
    def test_groups_by_category(self, console, registry):
        shown = ProviderListPresenter(console=console).present(registry)

        output = console.file.getvalue()
        assert shown == len(registry)
        assert "Supported Free Tier Providers" in output
        for label in ("COMPUTE", "DATABASES", "STORAGE", "LLM APIS", "SERVERLESS"):
            assert label in output
        assert output.index("COMPUTE") < output.index("DATABASES") < output.index("STORAGE")

    def test_shows_description_and_credit_card_label(self, console, registry):
        ProviderListPresenter(console=console).present(registry)

        output = console.file.getvalue()
        assert "Oracle Cloud ARM" in output
        assert "4 OCPU + 24GB RAM forever" in output
        assert "[No CC]" in output
        assert "[CC required]" in output

    def test_keeps_declaration_order_within_category(self, console, registry):
        ProviderListPresenter(console=console).present(registry, category=Category.LLM)

        output = console.file.getvalue()
        assert output.index("Groq") < output.index("Google AI Studio") < output.index("OpenRouter")
        assert "Oracle Cloud ARM" not in output

    def test_no_credit_card_filter(self, console, registry):
        shown = ProviderListPresenter(console=console).present(registry, no_credit_card=True)

        output = console.file.getvalue()
        assert shown == len(registry.no_credit_card())
        assert "Fly.io" not in output
        assert "[CC required]" not in output

    def test_empty_result(self, console, registry):
        shown = ProviderListPresenter(console=console).present(registry, category=Category.AUTH)

        assert shown == 0
        assert "No providers match" in console.file.getvalue()

    def test_present_json(self, console, registry):
        ProviderListPresenter(console=console).present_json(registry.by_category(Category.LLM))

        data = json.loads(console.file.getvalue())
        assert [item["id"] for item in data] == ["groq", "google-ai-studio", "openrouter"]


@pytest.mark.unit
class TestProviderDetailPresenter:
    def test_present(self, console, registry):
        ProviderDetailPresenter(console=console).present(registry.get("cloudflare-workers"))

        output = console.file.getvalue()
        assert "Cloudflare Workers" in output
        assert "serverless" in output
        assert "requests: 100,000 requests/day" in output
        assert "cpu: 10 ms" in output
        assert "No CC" in output

    def test_present_shows_api_endpoint(self, console, registry):
        ProviderDetailPresenter(console=console).present(registry.get("groq"))
        assert "https://api.groq.com/openai/v1" in console.file.getvalue()

    def test_present_without_limits(self, console, registry):
        ProviderDetailPresenter(console=console).present(registry.get("openrouter"))
        assert "none published" in console.file.getvalue()

    def test_present_shows_metadata(self, console, small_registry):
        ProviderDetailPresenter(console=console).present(small_registry.get("alpha-db"))

        output = console.file.getvalue()
        assert "region" in output
        assert "eu-west" in output

    def test_present_json(self, console, registry):
        ProviderDetailPresenter(console=console).present_json(registry.get("fly-io"))

        data = json.loads(console.file.getvalue())
        assert data["id"] == "fly-io"
        assert data["requires_cc"] is True
        assert data["free_tier"]["limits"][1]["period"] == "month"

    def test_present_not_found(self, console):
        ProviderDetailPresenter(console=console).present_not_found("nope")
        assert "Unknown provider: nope" in console.file.getvalue()
