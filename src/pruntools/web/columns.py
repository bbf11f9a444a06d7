"""Column sets for the material tables."""

from __future__ import annotations

from pruntools.table import Column

MATERIAL_COLUMNS = [
    Column("category_name", "Category"),
    Column("ticker", "Ticker"),
    Column("name", "Material"),
    Column("weight", "Weight"),
    Column("volume", "Volume"),
]

LISTING_COLUMNS = [
    Column("category_name", "Category"),
    Column("ticker", "Ticker"),
    Column("name", "Material"),
    Column("exchanges", "Exchange", sortable=False, searchable=False),
]

KAWA_COLUMNS = [
    Column("ticker", "Ticker"),
    Column("price", "Price"),
    Column("planet", "Planet"),
]
