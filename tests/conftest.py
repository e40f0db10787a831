import pytest

from link_validator.core.errors import TransportError


class DummyResponse:
    def __init__(self, text: str = "", status_code: int = 200, url: str = ""):
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code
        self.url = url


class StubFetcher:
    """Fetcher stand-in: answers from a dict of url -> response or exception."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[str] = []

    def get(self, url: str, **kwargs):
        self.calls.append(url)
        answer = self.routes.get(url)
        if answer is None:
            raise TransportError(url, f"no route for {url}")
        if isinstance(answer, Exception):
            raise answer
        if not answer.url:
            answer.url = url
        return answer


@pytest.fixture
def make_response():
    return DummyResponse


@pytest.fixture
def make_fetcher():
    return StubFetcher


def sts_page(*cells: str, table_id: str = "tablepress-stadtteilschulen") -> str:
    rows = "".join(f"<tr><td>Schule</td><td>{c}</td></tr>" for c in cells)
    return f"<html><body><table id='{table_id}'><tbody>{rows}</tbody></table></body></html>"


@pytest.fixture
def make_page():
    return sts_page
