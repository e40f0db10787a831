"""End-to-end tests of a validation run, without network access.

The discovery page and every linked page are served by stub fetchers (or by
monkeypatching `requests.Session.get` when the real `Fetcher` is exercised).
"""

import pytest
import requests

from link_validator.core.config import ValidatorConfig
from link_validator.core.errors import FetchError, TableNotFoundError, TransportError
from link_validator.core.models import LinkValidationResult
from link_validator.validation.orchestrator import ValidationStage, validate_links

SOURCE = "https://gest-hamburg.de/stadtteilschulen/"
CONFIG = ValidatorConfig(
    source_url=SOURCE,
    table_id="tablepress-stadtteilschulen",
    user_agent="TestBot/1.0",
)


def test_single_link_with_title(make_fetcher, make_response, make_page):
    fetcher = make_fetcher(
        {
            SOURCE: make_response(make_page("https://example.org/")),
            "https://example.org/": make_response("<title>Example</title>"),
        }
    )

    results = validate_links(CONFIG, fetcher=fetcher)

    assert results == [
        LinkValidationResult(
            url="https://example.org/",
            status_code=200,
            effective_url="https://example.org/",
            title="Example",
        )
    ]


def test_single_link_without_title_uses_host(make_fetcher, make_response, make_page):
    fetcher = make_fetcher(
        {
            SOURCE: make_response(make_page("https://example.org/")),
            "https://example.org/": make_response("<html><body>no title</body></html>"),
        }
    )

    [result] = validate_links(CONFIG, fetcher=fetcher)

    assert result.status_code == 200
    assert result.title == "example.org"


def test_timeout_with_real_fetcher(monkeypatch, make_response, make_page):
    page = make_response(make_page("https://example.org/"), url=SOURCE)

    def fake_get(self, url, **kw):
        if url == SOURCE:
            return page
        raise requests.Timeout("Read timed out. (read timeout=30)")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    results = validate_links(CONFIG)

    assert len(results) == 1
    result = results[0]
    assert result.url == "https://example.org/"
    assert result.status_code == 0
    assert result.effective_url == "https://example.org/"
    assert result.title == "Error: Read timed out. (read timeout=30)"


def test_order_and_duplicates_preserved(make_fetcher, make_response, make_page):
    links = [
        "https://c.example/",
        "https://a.example/",
        "https://down.example/",
        "https://c.example/",
        "https://b.example/",
    ]
    routes = {SOURCE: make_response(make_page(*links))}
    routes["https://a.example/"] = make_response("<title>A</title>")
    routes["https://b.example/"] = make_response("<title>B</title>", 500)
    routes["https://c.example/"] = make_response("<title>C</title>")
    routes["https://down.example/"] = TransportError("https://down.example/", "refused")
    fetcher = make_fetcher(routes)

    results = validate_links(CONFIG, fetcher=fetcher)

    assert [r.url for r in results] == links
    assert [r.status_code for r in results] == [200, 200, 0, 200, 500]
    assert [r.title for r in results] == ["C", "A", "Error: refused", "C", "b.example"]


def test_empty_table_gives_empty_result(make_fetcher, make_response, make_page):
    fetcher = make_fetcher({SOURCE: make_response(make_page("no link here"))})
    assert validate_links(CONFIG, fetcher=fetcher) == []


def test_links_are_validated_one_after_another(make_fetcher, make_response, make_page):
    routes = {SOURCE: make_response(make_page("https://a.example/", "https://b.example/"))}
    routes["https://a.example/"] = make_response("<title>A</title>")
    routes["https://b.example/"] = make_response("<title>B</title>")
    fetcher = make_fetcher(routes)

    validate_links(CONFIG, fetcher=fetcher)

    # link fetch then its title fetch, before the next link starts
    assert fetcher.calls == [
        SOURCE,
        "https://a.example/",
        "https://a.example/",
        "https://b.example/",
        "https://b.example/",
    ]


def test_stages_in_order(make_fetcher, make_response, make_page):
    fetcher = make_fetcher({SOURCE: make_response(make_page())})
    stages = []

    validate_links(CONFIG, fetcher=fetcher, on_stage=stages.append)

    assert stages == [
        ValidationStage.DISCOVERING,
        ValidationStage.VALIDATING,
        ValidationStage.DONE,
    ]


@pytest.mark.parametrize(
    "routes_for, error",
    [
        (lambda r, p: {SOURCE: r(p("https://a.example/"), 503)}, FetchError),
        (lambda r, p: {SOURCE: r("<html><table id='x'></table></html>")}, TableNotFoundError),
        (lambda r, p: {SOURCE: TransportError(SOURCE, "dns")}, TransportError),
    ],
)
def test_discovery_failure_aborts_run(
    make_fetcher, make_response, make_page, routes_for, error
):
    fetcher = make_fetcher(routes_for(make_response, make_page))
    stages = []

    with pytest.raises(error):
        validate_links(CONFIG, fetcher=fetcher, on_stage=stages.append)

    assert stages == [ValidationStage.DISCOVERING]
    assert fetcher.calls == [SOURCE]
