"""
Interfaces and abstract classes.

``Vehicle`` is the contract, ``BaseVehicle`` shares the start/stop
behaviour and leaves ``accelerate`` abstract, and ``Repository`` shows a
generic class parameterised by the type it stores.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Generic, List, Optional, TypeVar


class Vehicle(ABC):
    """Contract every vehicle fulfils."""

    @property
    @abstractmethod
    def brand(self) -> str: ...

    @abstractmethod
    def start(self) -> str: ...

    @abstractmethod
    def stop(self) -> str: ...

    @abstractmethod
    def accelerate(self, speed: int) -> str: ...


class BaseVehicle(Vehicle):
    """Shared implementation; subclasses decide how fast they may go."""

    max_speed: int = 0

    def __init__(self, brand: str) -> None:
        self._brand = brand
        self.current_speed = 0

    @property
    def brand(self) -> str:
        return self._brand

    def start(self) -> str:
        message = f"{self.brand} engine started"
        print(message)
        return message

    def stop(self) -> str:
        self.current_speed = 0
        message = f"{self.brand} stopped"
        print(message)
        return message

    @abstractmethod
    def accelerate(self, speed: int) -> str: ...


class Car(BaseVehicle):
    max_speed = 200

    def __init__(self, brand: str, capacity: int) -> None:
        super().__init__(brand)
        self.capacity = capacity

    def accelerate(self, speed: int) -> str:
        self.current_speed = min(speed, self.max_speed)
        message = f"{self.brand} car accelerating to {self.current_speed} km/h"
        print(message)
        return message

    def open_trunk(self) -> str:
        print("Trunk opened")
        return "Trunk opened"


class Motorcycle(BaseVehicle):
    max_speed = 300

    def accelerate(self, speed: int) -> str:
        self.current_speed = min(speed, self.max_speed)
        message = f"{self.brand} motorcycle accelerating to {self.current_speed} km/h"
        print(message)
        return message


T = TypeVar("T")


class Repository(Generic[T]):
    """In-memory store assigning increasing integer ids."""

    def __init__(self) -> None:
        self._items: Dict[int, T] = {}
        self._next_id = 1

    def add(self, item: T) -> int:
        item_id = self._next_id
        self._items[item_id] = item
        self._next_id += 1
        print(f"Added {type(item).__name__}")
        return item_id

    def get_by_id(self, item_id: int) -> Optional[T]:
        return self._items.get(item_id)

    def get_all(self) -> List[T]:
        return list(self._items.values())

    def delete(self, item_id: int) -> bool:
        item = self._items.pop(item_id, None)
        if item is None:
            return False
        print(f"Deleted {type(item).__name__}")
        return True


@dataclass
class Product:
    name: str
    price: Decimal


def drive(vehicles: List[Vehicle], speed: int = 100) -> List[str]:
    """Run every vehicle through start, accelerate and stop."""
    log: List[str] = []
    for vehicle in vehicles:
        log.append(vehicle.start())
        log.append(vehicle.accelerate(speed))
        log.append(vehicle.stop())
        print()
    return log


def main() -> None:
    print("=== Interfaces and Abstract Classes ===\n")
    drive([Car("Tesla", 5), Motorcycle("Harley Davidson")])

    print("=== Generic Repository ===")
    products: Repository[Product] = Repository()
    products.add(Product("Laptop", Decimal("999.99")))
    products.add(Product("Mouse", Decimal("29.99")))
    for product in products.get_all():
        print(f"Product: {product.name} - ${product.price}")


if __name__ == "__main__":
    main()
