"""End-to-end tests of the click CLI against a temporary data directory."""

from urllib.parse import unquote

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_WHATSAPP_NUMBER", "+54 9 11 1234-5678")
    monkeypatch.setenv("STOREFRONT_URL", "https://tienda.test")
    monkeypatch.delenv("STOREFRONT_CART_SESSION", raising=False)
    return CliRunner()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    return result


def _seed(runner):
    assert _invoke(runner, "product", "add", "--name", "Conjunto Encaje", "--price", "15000",
                   "--sizes", "S,M,L", "--colors", "Negro,Rojo").exit_code == 0
    assert _invoke(runner, "product", "add", "--name", "Bombacha", "--price", "4500").exit_code == 0


class TestSettings:

    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
        config = Settings.from_env()
        assert config.carts_file == tmp_path / "carts.json"
        assert config.products_file == tmp_path / "products.json"
        assert config.log_level == "DEBUG"


class TestProductCommands:

    def test_add_and_list(self, runner):
        _seed(runner)
        result = _invoke(runner, "product", "list")
        assert result.exit_code == 0
        assert "Conjunto Encaje" in result.output
        assert "$15.000" in result.output

    def test_update_hides_product(self, runner):
        _seed(runner)
        assert _invoke(runner, "product", "update", "--id", "2", "--inactive").exit_code == 0
        assert "Bombacha" not in _invoke(runner, "product", "list").output
        assert "Bombacha (inactive)" in _invoke(runner, "product", "list", "--all").output

    def test_inquire(self, runner):
        _seed(runner)
        result = _invoke(runner, "product", "inquire", "--product", "conjunto-encaje", "--size", "M")
        assert result.exit_code == 0
        assert result.output.startswith("https://wa.me/5491112345678?text=")
        assert "Ver en: https://tienda.test/productos/conjunto-encaje" in unquote(result.output)


class TestCartCommands:

    def test_add_show_and_checkout(self, runner):
        _seed(runner)
        assert _invoke(runner, "cart", "add", "--product", "1", "--size", "M", "--color", "Negro").exit_code == 0
        assert _invoke(runner, "cart", "add", "--product", "1", "--size", "M", "--color", "Negro",
                       "--quantity", "2").exit_code == 0
        assert _invoke(runner, "cart", "add", "--product", "bombacha").exit_code == 0

        shown = _invoke(runner, "cart", "show")
        assert "1-M-Negro" in shown.output
        assert "$49.500" in shown.output

        result = _invoke(runner, "cart", "checkout")
        assert result.exit_code == 0
        text = unquote(result.output.strip().split("?text=", 1)[1])
        assert "3x Conjunto Encaje" in text
        assert "💰 *TOTAL: $49.500*" in text

        assert "Cart is empty." in _invoke(runner, "cart", "show").output

    def test_update_and_remove(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "2")
        assert "$13.500" in _invoke(runner, "cart", "update", "--line", "2-no-size-no-color",
                                    "--quantity", "3").output
        assert "Cart is empty." in _invoke(runner, "cart", "remove", "--line", "2-no-size-no-color").output

    def test_sessions_are_separate(self, runner):
        _seed(runner)
        _invoke(runner, "--session", "ana", "cart", "add", "--product", "2")
        assert "Cart is empty." in _invoke(runner, "--session", "luz", "cart", "show").output
        assert "Bombacha" in _invoke(runner, "--session", "ana", "cart", "show").output

    def test_invalid_quantity_is_a_friendly_error(self, runner):
        _seed(runner)
        result = _invoke(runner, "cart", "add", "--product", "2", "--quantity", "0")
        assert result.exit_code == 1
        assert "Quantity must be positive" in result.output

    def test_checkout_empty_cart(self, runner):
        result = _invoke(runner, "cart", "checkout")
        assert result.exit_code == 1
        assert "Cart is empty" in result.output

    def test_clear(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "2", "--quantity", "2")
        result = _invoke(runner, "cart", "clear")
        assert "2 unit(s) removed" in result.output

    def test_empty_size_joins_the_unsized_line(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "2")
        _invoke(runner, "cart", "add", "--product", "2", "--size", "")
        shown = _invoke(runner, "cart", "show").output
        assert shown.count("2-no-size-no-color") == 1
        assert "$9.000" in shown

    def test_corrupt_catalog_is_a_friendly_error(self, runner, tmp_path):
        (tmp_path / "products.json").write_text("{not json", encoding="utf-8")
        for args in (
            ("cart", "add", "--product", "1"),
            ("product", "list"),
            ("product", "inquire", "--product", "1"),
        ):
            result = _invoke(runner, *args)
            assert result.exit_code == 1
            assert "not valid JSON" in result.output
            assert not isinstance(result.exception, ValueError)
