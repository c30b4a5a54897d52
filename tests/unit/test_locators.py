"""Tests for locator parsing."""

import pytest
from selenium.webdriver.common.by import By

from src.automation.locators import Locator, text_xpath, xpath_literal


class TestLocatorParse:
    """Tests for Locator.parse."""

    def test_bare_css(self):
        """Test unprefixed selectors default to CSS."""
        locator = Locator.parse("#login button.primary")
        assert locator.as_tuple() == (By.CSS_SELECTOR, "#login button.primary")

    def test_css_with_equals(self):
        """Test attribute selectors are not mistaken for prefixes."""
        locator = Locator.parse("input[name=email]")
        assert locator.as_tuple() == (By.CSS_SELECTOR, "input[name=email]")

    def test_bare_xpath(self):
        """Test XPath detection."""
        assert Locator.parse("//div[@id='x']").by == By.XPATH
        assert Locator.parse("(//a)[2]").by == By.XPATH

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("css=.item", (By.CSS_SELECTOR, ".item")),
            ("xpath=//span", (By.XPATH, "//span")),
            ("id=username", (By.ID, "username")),
            ("name=q", (By.NAME, "q")),
            ("link=Sign in", (By.LINK_TEXT, "Sign in")),
            ("CSS=.upper", (By.CSS_SELECTOR, ".upper")),
        ],
    )
    def test_prefixes(self, raw, expected):
        """Test explicit prefixes."""
        assert Locator.parse(raw).as_tuple() == expected

    def test_text_prefix(self):
        """Test text locators become XPath."""
        locator = Locator.parse("text=OK")
        assert locator.by == By.XPATH
        assert locator.value == "//*[normalize-space(text())='OK']"
        assert str(locator) == "text=OK"

    def test_text_with_equals(self):
        """Test text containing '=' keeps its remainder."""
        assert Locator.parse("text=a=b").value == "//*[normalize-space(text())='a=b']"

    @pytest.mark.parametrize("raw", ["text=\"Sign in\"", "text='Sign in'"])
    def test_quoted_text(self, raw):
        """Test surrounding quotes are not part of the matched text."""
        assert Locator.parse(raw).value == "//*[normalize-space(text())='Sign in']"

    def test_inner_quotes_kept(self):
        """Test quotes inside the text are kept."""
        assert Locator.parse("text=it's").value == "//*[normalize-space(text())=\"it's\"]"

    @pytest.mark.parametrize("raw", ["", "   ", "css=", "text=  ", "text=\"\""])
    def test_empty(self, raw):
        """Test empty locators are rejected."""
        with pytest.raises(ValueError):
            Locator.parse(raw)

    def test_relative_text(self):
        """Test relative text locator."""
        locator = Locator.text("Paris", relative=True)
        assert locator.value == ".//*[normalize-space(text())='Paris']"


class TestXPathLiteral:
    """Tests for XPath quoting."""

    def test_plain(self):
        assert xpath_literal("abc") == "'abc'"

    def test_single_quote(self):
        assert xpath_literal("it's") == '"it\'s"'

    def test_both_quotes(self):
        """Test concat() for mixed quotes."""
        assert xpath_literal("a'b\"c") == "concat('a', \"'\", 'b\"c')"

    def test_text_xpath_strips(self):
        assert text_xpath("  Save  ") == "//*[normalize-space(text())='Save']"
