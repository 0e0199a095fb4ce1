"""Tests for API info and server metadata."""

from ir_to_openapi.models.meta import (
    DEFAULT_INFO,
    DEFAULT_SERVERS,
    ApiInfo,
    Server,
    parse_info,
    parse_servers,
)


class TestParseInfo:
    """Tests for parse_info."""

    def test_default_flag_value(self) -> None:
        """The default flag value yields the default info."""
        info = parse_info(DEFAULT_INFO)
        assert info.to_document() == {"title": "API", "version": "1.0.0"}

    def test_quoted_values(self) -> None:
        """Quotes are stripped and spaces kept."""
        info = parse_info('title="My Shop API",version="2.1.0"')
        assert info.title == "My Shop API"
        assert info.version == "2.1.0"

    def test_extra_keys_kept(self) -> None:
        """Unknown keys pass through after title and version."""
        info = parse_info('version=3,title=X,description="Shop backend"')
        assert list(info.to_document()) == ["title", "version", "description"]
        assert info.to_document()["description"] == "Shop backend"

    def test_missing_keys_default(self) -> None:
        """Missing title or version fall back to defaults."""
        info = parse_info('title="Only title"')
        assert info.version == "1.0.0"

    def test_malformed_parts_skipped(self) -> None:
        """Parts without a key or an equals sign are ignored."""
        info = parse_info('garbage,=x,title="T"')
        assert info.to_document() == {"title": "T", "version": "1.0.0"}

    def test_empty(self) -> None:
        """An empty string yields the default info."""
        assert parse_info("") == ApiInfo()


class TestParseServers:
    """Tests for parse_servers."""

    def test_default_flag_value(self) -> None:
        """The default flag value yields the example server."""
        servers = parse_servers(DEFAULT_SERVERS)
        assert [s.to_document() for s in servers] == [{"url": "https://api.example.com"}]

    def test_multiple_servers(self) -> None:
        """Servers are separated by semicolons."""
        servers = parse_servers(
            'url="https://prod.example.com",description="Production";url="http://localhost:8080"'
        )
        assert [s.url for s in servers] == ["https://prod.example.com", "http://localhost:8080"]
        assert servers[0].description == "Production"
        assert servers[1].to_document() == {"url": "http://localhost:8080"}

    def test_entries_without_url_skipped(self) -> None:
        """Entries missing a url are dropped."""
        servers = parse_servers('description="no url";;url="https://a"')
        assert [s.url for s in servers] == ["https://a"]

    def test_server_extra_keys(self) -> None:
        """Extra keys are kept on the server entry."""
        server = Server.model_validate({"url": "https://a", "x-env": "prod"})
        assert server.to_document() == {"url": "https://a", "x-env": "prod"}
