from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Item:
    short_description: str
    price: str

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        return cls(short_description=data["shortDescription"], price=data["price"])

    def to_dict(self) -> dict:
        return {"shortDescription": self.short_description, "price": self.price}


@dataclass(frozen=True)
class Receipt:
    """ A validated receipt; items are kept as a tuple so the whole record is immutable """
    retailer: str
    purchase_date: str
    purchase_time: str
    items: Tuple[Item, ...]
    total: str

    @classmethod
    def from_dict(cls, data: dict) -> "Receipt":
        """ Builds a receipt from the decoded request body (camelCase keys) """
        return cls(
            retailer=data["retailer"],
            purchase_date=data["purchaseDate"],
            purchase_time=data["purchaseTime"],
            items=tuple(Item.from_dict(item) for item in data["items"]),
            total=data["total"],
        )

    def to_dict(self) -> dict:
        return {
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date,
            "purchaseTime": self.purchase_time,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
        }
