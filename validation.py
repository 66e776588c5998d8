import re
from datetime import datetime

required_receipt_attributes = ["retailer", "total", "items", "purchaseDate", "purchaseTime"]
required_item_attributes = ["shortDescription", "price"]
RECEIPT_DATE_FORMAT = '%Y-%m-%d'
RECEIPT_TIME_FORMAT = '%H:%M'

# word characters are [A-Za-z0-9_]; whitespace is space, tab, newline, form feed and carriage return
RETAILER_PATTERN = re.compile(r"[A-Za-z0-9_ \t\n\f\r\-&]+")
DESCRIPTION_PATTERN = re.compile(r"[A-Za-z0-9_ \t\n\f\r\-]+")
PRICE_PATTERN = re.compile(r"\d+\.\d{2}", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)


class ReceiptValidationError(ValueError):
    """ Raised when a submitted receipt is malformed """


def validate_receipt_json_structure(receipt):
    """ Validates structure of the json input """
    if not isinstance(receipt, dict):
        raise ReceiptValidationError("Error: receipt must be a JSON object")

    for attribute in required_receipt_attributes:
        if attribute not in receipt:  # check if attribute is missing
            raise ReceiptValidationError(f"Error: missing {attribute} in receipt")
        if attribute != "items" and not isinstance(receipt[attribute], str):  # check attribute type
            raise ReceiptValidationError(f"Error: invalid {attribute} format")

    if not isinstance(receipt["items"], list):
        raise ReceiptValidationError("Error: invalid receipt items list format")
    for item in receipt["items"]:
        if not isinstance(item, dict):
            raise ReceiptValidationError("Error: invalid receipt item format")
        for attribute in required_item_attributes:
            if not isinstance(item.get(attribute), str):
                raise ReceiptValidationError("Error: invalid receipt item format")


def validate_retailer_name(retailer_name: str):
    """ Validates retailer name against the allowed charset """
    if not RETAILER_PATTERN.fullmatch(retailer_name):
        raise ReceiptValidationError(f"Error: invalid receipt retailer name ({retailer_name})")


def validate_purchase_date(date: str):
    """ Validates the YYYY-MM-DD shape first so strptime cannot accept single-digit fields """
    try:
        if not DATE_PATTERN.fullmatch(date):
            raise ValueError(date)
        datetime.strptime(date, RECEIPT_DATE_FORMAT)
    except ValueError:
        raise ReceiptValidationError(f"Error: invalid receipt purchase date ({date})")


def validate_purchase_time(time: str):
    try:
        if not TIME_PATTERN.fullmatch(time):
            raise ValueError(time)
        datetime.strptime(time, RECEIPT_TIME_FORMAT)
    except ValueError:
        raise ReceiptValidationError(f"Error: invalid receipt purchase time ({time})")


def validate_items(items: list):
    """ Validates the item list length and each item's description and price """
    if len(items) < 1:  # check if the items list is empty
        raise ReceiptValidationError("Error: receipt items list is empty")
    for item in items:
        description = item["shortDescription"]
        price = item["price"]
        if not DESCRIPTION_PATTERN.fullmatch(description):
            raise ReceiptValidationError(f"Error: invalid item description ({description})")
        if not PRICE_PATTERN.fullmatch(price):
            raise ReceiptValidationError(f"Error: invalid item price ({price})")


def validate_total(total: str):
    """ Validates receipt total amount """
    if not PRICE_PATTERN.fullmatch(total):
        raise ReceiptValidationError(f"Error: invalid receipt total ({total})")


def validate_receipt(receipt):
    """
    Runs every check against a decoded receipt body and raises
    ReceiptValidationError on the first one that fails.
    """
    validate_receipt_json_structure(receipt)
    validate_retailer_name(receipt["retailer"])
    validate_purchase_date(receipt["purchaseDate"])
    validate_purchase_time(receipt["purchaseTime"])
    validate_items(receipt["items"])
    validate_total(receipt["total"])


def is_valid_receipt(receipt) -> bool:
    try:
        validate_receipt(receipt)
    except ReceiptValidationError:
        return False
    return True
