import math
from typing import Iterable

from models import Item, Receipt

POINTS_RETAILER_NAME_ALPHANUM_CHARACTER = 1
POINTS_TOTAL_HAS_NO_CENTS = 50
POINTS_TOTAL_IS_MULTIPLE_OF_QUARTERS = 25
POINTS_ITEMS_COUNT = 5
POINTS_ITEM_DESCRIPTION = 0.2
POINTS_ODD_PURCHASE_DAY = 6
POINTS_VALID_PURCHASE_HOUR = 10
REWARD_ITEM_DESCRIPTION_LENGTH_FACTOR = 3
REWARD_HOUR_START = 14
REWARD_HOUR_END = 16


def to_cents(amount: str) -> int:
    """ Parses a money amount and rounds it to whole cents, halves away from zero """
    scaled = float(amount) * 100
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def score_retailer(retailer_name: str) -> int:
    """ One point per letter or decimal digit; spaces and symbols score nothing """
    return sum(POINTS_RETAILER_NAME_ALPHANUM_CHARACTER
               for c in retailer_name if c.isalpha() or c.isdecimal())


def score_total(total: str) -> int:
    try:
        cents = to_cents(total)
    except (ValueError, OverflowError):
        return 0
    points = 0
    if cents % 100 == 0:
        points += POINTS_TOTAL_HAS_NO_CENTS
    if cents % 25 == 0:
        points += POINTS_TOTAL_IS_MULTIPLE_OF_QUARTERS
    return points


def score_item_description(item: Item) -> int:
    """ Price bonus for items whose trimmed description length is a multiple of 3 """
    if len(item.short_description.strip()) % REWARD_ITEM_DESCRIPTION_LENGTH_FACTOR != 0:
        return 0
    try:
        return math.ceil(float(item.price) * POINTS_ITEM_DESCRIPTION)
    except (ValueError, OverflowError):
        return 0


def score_items(items: Iterable[Item]) -> int:
    """ 5 points for every second item, plus the description bonus of each item """
    points = 0
    for count, item in enumerate(items, start=1):
        if count % 2 == 0:
            points += POINTS_ITEMS_COUNT
        points += score_item_description(item)
    return points


def score_purchase_day(date: str) -> int:
    """ Reads the day from the last two characters of the date """
    try:
        day = int(date[-2:])
    except ValueError:
        return 0
    return POINTS_ODD_PURCHASE_DAY if day % 2 == 1 else 0


def score_purchase_time(time: str) -> int:
    """ Reads the hour from the first two characters; 14:00 through 15:59 qualifies """
    try:
        hour = int(time[:2])
    except ValueError:
        return 0
    return POINTS_VALID_PURCHASE_HOUR if REWARD_HOUR_START <= hour < REWARD_HOUR_END else 0


def calculate_points(receipt: Receipt) -> int:
    """ Calculates points earned from each component of the receipt """
    points = 0
    points += score_retailer(receipt.retailer)
    points += score_total(receipt.total)
    points += score_items(receipt.items)
    points += score_purchase_day(receipt.purchase_date)
    points += score_purchase_time(receipt.purchase_time)
    return points
