"""Generators for demo tables."""
from __future__ import annotations

import random
from datetime import date
from typing import Any, List, Optional, Sequence

from dateutil.relativedelta import relativedelta

from .formatters import boolean_formatter, currency_formatter
from .models import Column, SemanticType
from .table import Table

EMPLOYEE_NAMES = [
    "Alice Johnson", "Bob Smith", "Charlie Brown", "Diana Prince",
    "Edward Norton", "Fiona Apple", "George Lucas", "Helen Troy",
    "Ivan Drago", "Julia Roberts", "Kevin Hart", "Luna Lovegood",
    "Mike Tyson", "Nancy Drew", "Oscar Wilde", "Penny Lane",
    "Quincy Jones", "Rachel Green", "Steve Jobs", "Tina Turner",
    "Uma Thurman", "Victor Hugo", "Wendy Darling", "Xavier Woods",
]

DEPARTMENTS = [
    "Engineering", "Marketing", "Sales", "HR", "Finance",
    "Design", "Operations", "Customer Success", "Legal", "R&D",
]

PRODUCTS = [
    "Wireless Headphones", "Smart Watch", "Laptop Stand", "USB-C Cable",
    "Mechanical Keyboard", "Gaming Mouse", "Monitor", "Desk Lamp",
    "Phone Case", "Tablet Stand", "Webcam", "Microphone",
    "Speaker Set", "Power Bank", "Charging Pad", "Bluetooth Adapter",
]

CATEGORIES = [
    "Electronics", "Accessories", "Office", "Furniture", "Stationery",
    "Kitchen", "Travel", "Storage", "Audio", "Computing",
]

SYMBOLS = ["AAPL", "GOOGL", "MSFT", "AMZN", "TSLA", "META", "NVDA", "NFLX"]

LABELS = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta",
    "Eta", "Theta", "Iota", "Kappa", "Lambda", "Mu",
]

SAMPLE_TABLE_NAMES = ("employees", "products", "financial")


class SampleDataGenerator:
    def __init__(self, seed: Optional[int] = None, today: Optional[date] = None) -> None:
        self.rand = random.Random(seed)
        self.today = today or date.today()

    def employee_columns(self) -> List[Column]:
        return [
            Column("ID", semantic_type=SemanticType.INTEGER, width=5),
            Column("Name", semantic_type=SemanticType.TEXT, width=20),
            Column("Department", semantic_type=SemanticType.TEXT, width=15),
            Column("Salary", semantic_type=SemanticType.FLOAT, width=10, formatter=currency_formatter),
            Column("Start Date", semantic_type=SemanticType.DATE, width=12),
            Column(
                "Active",
                semantic_type=SemanticType.BOOLEAN,
                width=8,
                searchable=False,
                formatter=boolean_formatter("yes", "no"),
            ),
        ]

    def employee_table(self, count: int = 50) -> Table:
        table = Table(self.employee_columns(), page_size=10)
        for idx in range(count):
            start = self.today - relativedelta(
                years=self.rand.randrange(5),
                months=self.rand.randrange(12),
                days=self.rand.randrange(28),
            )
            table.add_row(
                idx + 1,
                EMPLOYEE_NAMES[idx % len(EMPLOYEE_NAMES)],
                self.rand.choice(DEPARTMENTS),
                round(45000.0 + self.rand.random() * 85000.0, 2),
                start.isoformat(),
                self.rand.random() > 0.1,
            )
        return table

    def product_columns(self) -> List[Column]:
        return [
            Column("SKU", semantic_type=SemanticType.TEXT, width=10),
            Column("Product Name", semantic_type=SemanticType.TEXT, width=25),
            Column("Category", semantic_type=SemanticType.TEXT, width=15),
            Column("Price", semantic_type=SemanticType.FLOAT, width=8, formatter=currency_formatter),
            Column("Stock", semantic_type=SemanticType.INTEGER, width=8),
            Column("Available", semantic_type=SemanticType.BOOLEAN, width=10, searchable=False),
        ]

    def product_table(self, count: int = 100) -> Table:
        table = Table(self.product_columns(), page_size=15)
        for idx in range(count):
            product = PRODUCTS[idx % len(PRODUCTS)]
            if idx >= len(PRODUCTS):
                product = f"{product} v{idx // len(PRODUCTS) + 1}"
            stock = self.rand.randrange(200)
            table.add_row(
                f"SKU-{idx + 1:04d}",
                product,
                self.rand.choice(CATEGORIES),
                round(9.99 + self.rand.random() * 490.0, 2),
                stock,
                stock > 0,
            )
        return table

    def financial_columns(self) -> List[Column]:
        return [
            Column("Date", semantic_type=SemanticType.DATE, width=12),
            Column("Symbol", semantic_type=SemanticType.TEXT, width=8),
            Column("Open", semantic_type=SemanticType.FLOAT, width=10),
            Column("High", semantic_type=SemanticType.FLOAT, width=10),
            Column("Low", semantic_type=SemanticType.FLOAT, width=10),
            Column("Close", semantic_type=SemanticType.FLOAT, width=10),
            Column("Volume", semantic_type=SemanticType.INTEGER, width=12),
        ]

    def financial_table(self, days: int = 30) -> Table:
        """Daily quotes for every symbol, newest first, each close seeding the next open."""
        table = Table(self.financial_columns(), page_size=20)
        for symbol in SYMBOLS:
            base = 100.0 + self.rand.random() * 400.0
            for offset in range(days):
                day = self.today - relativedelta(days=offset)
                opening = base + (self.rand.random() - 0.5) * 20.0
                high = opening + self.rand.random() * 10.0
                low = opening - self.rand.random() * 10.0
                close = low + self.rand.random() * (high - low)
                base = close
                table.add_row(
                    day.isoformat(),
                    symbol,
                    round(opening, 2),
                    round(high, 2),
                    round(low, 2),
                    round(close, 2),
                    1_000_000 + self.rand.randrange(10_000_000),
                )
        return table

    def custom_table(self, rows: int, columns: Sequence[Column]) -> Table:
        table = Table(columns, page_size=15)
        for idx in range(rows):
            table.add_row(*(self._value_for_type(column.semantic_type, idx) for column in columns))
        return table

    def _value_for_type(self, semantic_type: SemanticType, index: int) -> Any:
        if semantic_type == SemanticType.TEXT:
            return f"{self.rand.choice(LABELS)}-{index + 1}"
        if semantic_type == SemanticType.INTEGER:
            return self.rand.randrange(1000) + 1
        if semantic_type == SemanticType.FLOAT:
            return self.rand.random() * 1000.0
        if semantic_type == SemanticType.DATE:
            return (self.today - relativedelta(days=self.rand.randrange(365 * 2))).isoformat()
        if semantic_type == SemanticType.BOOLEAN:
            return self.rand.random() > 0.5
        return f"Value-{index + 1}"

    def sample_table(self, name: str) -> Table:
        """Build a demo table by name; unknown names get the employee table."""
        builders = {
            "employees": self.employee_table,
            "products": self.product_table,
            "financial": self.financial_table,
        }
        return builders.get(name, self.employee_table)()
