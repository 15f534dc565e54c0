"""Catalogue entries used by the scenarios (prices in USD)."""

from .models import Category, ProductInfo


SAMSUNG_GALAXY_S6 = ProductInfo("Samsung galaxy s6", Category.PHONES, 360)
SONY_XPERIA_Z5 = ProductInfo("Sony xperia z5", Category.PHONES, 320)
MACBOOK_PRO = ProductInfo("MacBook Pro", Category.LAPTOPS, 1100)
MACBOOK_AIR = ProductInfo("MacBook air", Category.LAPTOPS, 700)
SONY_VAIO_I5 = ProductInfo("Sony vaio i5", Category.LAPTOPS, 790)
APPLE_MONITOR_24 = ProductInfo("Apple monitor 24", Category.MONITORS, 400)

PRODUCTS = {
    "SAMSUNG_GALAXY_S6": SAMSUNG_GALAXY_S6,
    "SONY_XPERIA_Z5": SONY_XPERIA_Z5,
    "MACBOOK_PRO": MACBOOK_PRO,
    "MACBOOK_AIR": MACBOOK_AIR,
    "SONY_VAIO_I5": SONY_VAIO_I5,
    "APPLE_MONITOR_24": APPLE_MONITOR_24,
}
