"""String locator parsing into Selenium locator tuples."""

from dataclasses import dataclass

from selenium.webdriver.common.by import By

# Prefix -> Selenium strategy. "text" is rewritten to XPath below.
PREFIX_MAP = {
    "css": By.CSS_SELECTOR,
    "xpath": By.XPATH,
    "id": By.ID,
    "name": By.NAME,
    "link": By.LINK_TEXT,
    "text": By.XPATH,
}


def xpath_literal(value: str) -> str:
    """Quote a string as an XPath literal.

    XPath 1.0 has no escape sequences, so a value holding both quote
    kinds is split and rebuilt with concat().

    Args:
        value: Raw string

    Returns:
        XPath string literal
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def unquote(value: str) -> str:
    """Drop one pair of matching quotes around a text locator body."""
    stripped = value.strip()
    if len(stripped) >= 2 and stripped[0] == stripped[-1] and stripped[0] in "\"'":
        return stripped[1:-1]
    return value


def text_xpath(text: str, scope: str = "//") -> str:
    """Build an XPath matching elements whose own text equals ``text``."""
    return f"{scope}*[normalize-space(text())={xpath_literal(text.strip())}]"


@dataclass(frozen=True)
class Locator:
    """A resolved locator string.

    Attributes:
        by: Selenium strategy (By.CSS_SELECTOR, By.XPATH, ...)
        value: Strategy value
        raw: Original string as written by the caller
    """

    by: str
    value: str
    raw: str

    def as_tuple(self) -> tuple[str, str]:
        """Get (by, value) tuple for find_element and expected conditions."""
        return (self.by, self.value)

    @classmethod
    def parse(cls, raw: str) -> "Locator":
        """Parse a locator string.

        Supported forms are ``css=``, ``xpath=``, ``id=``, ``name=``,
        ``link=`` and ``text=`` prefixes. Without a prefix, strings starting
        with ``/`` or ``(`` are XPath and anything else is CSS.

        Args:
            raw: Locator string

        Returns:
            Locator instance

        Raises:
            ValueError: If the locator is empty
        """
        if not raw or not raw.strip():
            raise ValueError("Locator must not be empty")

        prefix, sep, body = raw.partition("=")
        prefix = prefix.strip().lower()
        if sep and prefix in PREFIX_MAP:
            if not body.strip():
                raise ValueError(f"Locator has an empty body: {raw!r}")
            if prefix == "text":
                text = unquote(body)
                if not text.strip():
                    raise ValueError(f"Locator has an empty body: {raw!r}")
                return cls(by=By.XPATH, value=text_xpath(text), raw=raw)
            return cls(by=PREFIX_MAP[prefix], value=body.strip(), raw=raw)

        stripped = raw.strip()
        if stripped.startswith(("/", "(")):
            return cls(by=By.XPATH, value=stripped, raw=raw)
        return cls(by=By.CSS_SELECTOR, value=stripped, raw=raw)

    @classmethod
    def text(cls, text: str, relative: bool = False) -> "Locator":
        """Create a locator for an element with exactly this visible text.

        Args:
            text: Visible text to match
            relative: Search below a context element instead of the document

        Returns:
            Locator instance
        """
        if not relative:
            return cls.parse(f"text={text}")
        return cls(by=By.XPATH, value=text_xpath(text, scope=".//"), raw=f"text={text}")

    def __str__(self) -> str:
        return self.raw
