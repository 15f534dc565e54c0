"""Order form data sets."""

from .models import CheckoutInfo


JOHN_DOE = CheckoutInfo(
    name="John Doe",
    country="USA",
    city="New York",
    credit_card="4111111111111111",
    month="12",
    year="2025",
)

ANNA_VN = CheckoutInfo(
    name="Anna",
    country="VN",
    city="HCM",
    credit_card="12345678",
    month="01",
    year="2026",
)

CHECKOUT_DATA = {
    "JOHN_DOE": JOHN_DOE,
    "ANNA_VN": ANNA_VN,
}
