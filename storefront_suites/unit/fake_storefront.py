"""
================================================================================
Fake Storefront Surface
================================================================================

In-memory stand-ins for the parts of the Playwright async API the framework
uses, so page objects, waits and workflows can be exercised without a
browser.

A FakePage holds elements keyed by the rendered selector query
("css=#logInModal", "xpath=//a[@id='login2']"). Click handlers keyed the
same way let a test script the page's reaction to an action.

Queries below are written in the short dialect, as the storefront is
queried with the default configuration.

================================================================================
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


NAVBAR_HOME = 'css=a.nav-link:has-text("Home")'
NAVBAR_CART = "css=a#cartur"
NAVBAR_LOGIN = "css=a#login2"
NAVBAR_LOGOUT = "css=a#logout2"
WELCOME = "css=a#nameofuser"

LOGIN_MODAL = "css=#logInModal"
USERNAME = "css=#loginusername"
PASSWORD = "css=#loginpassword"
LOGIN_BUTTON = 'css=#logInModal button:has-text("Log in")'

PRODUCT_CARDS = "css=.card-title a"

CART_ROWS = "css=#tbodyid > tr"
DELETE_LINKS = 'css=#tbodyid a:has-text("Delete")'
TOTAL = "css=#totalp"
PLACE_ORDER = 'css=button:has-text("Place Order")'


@dataclass
class FakeElement:
    text: str = ""
    visible: bool = True


class FakeLocator:
    """Locator over the elements registered for one query."""

    def __init__(self, page: "FakePage", query: str, index: Optional[int] = None):
        self.page = page
        self.query = query
        self.index = index

    def __repr__(self) -> str:
        return f"FakeLocator({self.query!r}, index={self.index})"

    def _elements(self) -> List[FakeElement]:
        return self.page.elements.get(self.query, [])

    def _target(self) -> Optional[FakeElement]:
        elements = self._elements()
        position = self.index or 0
        return elements[position] if position < len(elements) else None

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.query, 0)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.page, self.query, index)

    def locator(self, selector: str) -> "FakeLocator":
        """Descendants of the addressed element, keyed "<query> >> nth=<i> >> <selector>"."""
        return FakeLocator(self.page, f"{self.query} >> nth={self.index or 0} >> {selector}")

    async def count(self) -> int:
        if self.index is None:
            return len(self._elements())
        return 1 if self._target() is not None else 0

    async def is_visible(self) -> bool:
        target = self._target()
        return target is not None and target.visible

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.page.waits.append((self.query, state))
        visible = await self.is_visible()
        if (state == "visible") != visible:
            raise PlaywrightTimeoutError(
                f"Timeout {timeout}ms exceeded waiting for {self.query} to be {state}"
            )

    async def click(self, timeout: Optional[float] = None) -> None:
        self.page.clicks.append(self.query)
        handler = self.page.click_handlers.get(self.query)
        if handler is not None:
            handler()

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self.page.filled[self.query] = value

    async def text_content(self, timeout: Optional[float] = None) -> Optional[str]:
        target = self._target()
        return None if target is None else target.text

    async def all_text_contents(self) -> List[str]:
        return [element.text for element in self._elements()]


class FakeDialog:
    def __init__(self, message: str):
        self.message = message
        self.accepted = False

    async def accept(self) -> None:
        self.accepted = True


class FakeEventInfo:
    """Result of `page.expect_event("dialog")`; resolved when the block exits."""

    def __init__(self, page: "FakePage", event: str, timeout: Optional[float]):
        self.page = page
        self.event = event
        self.timeout = timeout
        self._dialog: Optional[FakeDialog] = None

    async def __aenter__(self) -> "FakeEventInfo":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            return
        if not self.page.dialogs:
            raise PlaywrightTimeoutError(
                f"Timeout {self.timeout}ms exceeded while waiting for event \"{self.event}\""
            )
        self._dialog = self.page.dialogs.pop(0)

    @property
    def value(self):
        async def resolve() -> FakeDialog:
            return self._dialog
        return resolve()


@dataclass
class FakePage:
    """Playwright Page stand-in."""
    elements: Dict[str, List[FakeElement]] = field(default_factory=dict)
    click_handlers: Dict[str, Callable[[], None]] = field(default_factory=dict)
    clicks: List[str] = field(default_factory=list)
    filled: Dict[str, str] = field(default_factory=dict)
    waits: List[tuple] = field(default_factory=list)
    dialogs: List[FakeDialog] = field(default_factory=list)
    listeners: List[tuple] = field(default_factory=list)
    visited: List[str] = field(default_factory=list)
    locator_calls: int = 0
    back_navigations: int = 0
    closed: bool = False
    url: str = "about:blank"

    def locator(self, query: str) -> FakeLocator:
        self.locator_calls += 1
        return FakeLocator(self, query)

    def is_closed(self) -> bool:
        return self.closed

    def on(self, event: str, handler: Callable) -> None:
        self.listeners.append((event, handler))

    def expect_event(self, event: str, timeout: Optional[float] = None) -> FakeEventInfo:
        return FakeEventInfo(self, event, timeout)

    async def goto(self, url: str, **kwargs) -> None:
        self.visited.append(url)
        self.url = url

    async def go_back(self, **kwargs) -> None:
        self.back_navigations += 1

    async def wait_for_load_state(self, state: str = "load", **kwargs) -> None:
        pass

    # Helpers for arranging page state

    def show(self, query: str, *texts: str) -> None:
        """Register visible elements (one per text, at least one)."""
        self.elements[query] = [FakeElement(text) for text in (texts or ("",))]

    def hide(self, query: str) -> None:
        for element in self.elements.get(query, []):
            element.visible = False

    def open_dialog(self, message: str) -> FakeDialog:
        dialog = FakeDialog(message)
        self.dialogs.append(dialog)
        return dialog


def product_card(name: str) -> str:
    return f'css=.card-title a:has-text("{name}")'


def arrange_login(page: FakePage, succeed: bool = True, username: str = "autouser") -> None:
    """Script the login modal: opening it, then accepting or ignoring the login."""
    page.show(NAVBAR_LOGIN)

    def open_modal():
        for query in (LOGIN_MODAL, USERNAME, PASSWORD, LOGIN_BUTTON):
            page.show(query)

    def submit():
        if not succeed:
            return
        page.hide(LOGIN_MODAL)
        page.hide(NAVBAR_LOGIN)
        page.show(WELCOME, f"Welcome {username}")
        page.show(NAVBAR_LOGOUT)

    page.click_handlers[NAVBAR_LOGIN] = open_modal
    page.click_handlers[LOGIN_BUTTON] = submit


def arrange_cart(page: FakePage, names: Sequence[str]) -> None:
    """Cart rows whose first delete link removes the first row."""
    page.show(CART_ROWS, *names)
    page.show(DELETE_LINKS, *names)
    if not names:
        page.elements[CART_ROWS] = []
        page.elements[DELETE_LINKS] = []

    def delete_first():
        del page.elements[CART_ROWS][0]
        del page.elements[DELETE_LINKS][0]

    page.click_handlers[DELETE_LINKS] = delete_first


def arrange_cart_table(page: FakePage, rows: Sequence[Tuple[str, str]]) -> None:
    """Cart rows with rendered cells: image, title, price, delete link."""
    arrange_cart(page, [name for name, _ in rows])
    for index, (name, price) in enumerate(rows):
        page.show(f"{CART_ROWS} >> nth={index} >> td", "", name, price, "Delete")
