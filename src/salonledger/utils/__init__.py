"""Utility functions for salonledger."""

from salonledger.utils.date_parser import (
    parse_date,
    parse_time,
    combine_date_time,
    truncate_to_millis,
)
from salonledger.utils.amount_parser import parse_amount, parse_positive_amount
from salonledger.utils.commission import coerce_commission

__all__ = [
    "parse_date",
    "parse_time",
    "combine_date_time",
    "truncate_to_millis",
    "parse_amount",
    "parse_positive_amount",
    "coerce_commission",
]
