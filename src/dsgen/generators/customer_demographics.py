"""
customer_demographics generator.

Rows enumerate every combination of gender, marital status, education,
purchase estimate, credit rating and three dependant counts. Unlike
household_demographics the walk starts from ``row_number - 1``, so row 1 is
the first entry of every list.
"""

from __future__ import annotations

from ..nulls import create_null_bitmap
from .base import GenerationContext, Row, register

MAX_CHILDREN = 7
MAX_EMPLOYED = 7
MAX_COLLEGE = 7


@register("customer_demographics")
class CustomerDemographicsGenerator:
    def __init__(self, context: GenerationContext) -> None:
        self.context = context
        self.table = context.table
        store = context.distributions
        self.genders = store.require("genders", "gender")
        self.marital_statuses = store.require("marital_statuses", "marital_status")
        self.education = store.require("education", "education")
        self.purchase_bands = store.require("purchase_band", "purchase_estimate")
        self.credit_ratings = store.require("credit_ratings", "credit_rating")
        self._nulls = context.stream("cd_nulls")

    def generate_row(self, row_number: int) -> Row:
        null_bitmap = create_null_bitmap(self.table, self._nulls)

        index = row_number - 1
        gender = self.genders.value_at_mod("gender", index)
        index //= self.genders.size
        marital_status = self.marital_statuses.value_at_mod("marital_status", index)
        index //= self.marital_statuses.size
        education = self.education.value_at_mod("education", index)
        index //= self.education.size
        purchase_estimate = self.purchase_bands.value_at_mod("purchase_estimate", index)
        index //= self.purchase_bands.size
        credit_rating = self.credit_ratings.value_at_mod("credit_rating", index)
        index //= self.credit_ratings.size
        dep_count = index % MAX_CHILDREN
        index //= MAX_CHILDREN
        dep_employed_count = index % MAX_EMPLOYED
        index //= MAX_EMPLOYED
        dep_college_count = index % MAX_COLLEGE

        values = (
            row_number,
            gender,
            marital_status,
            education,
            purchase_estimate,
            credit_rating,
            dep_count,
            dep_employed_count,
            dep_college_count,
        )
        return Row(self.table.name, values, null_bitmap)

    def consume_remaining_seeds(self) -> None:
        self.context.consume_remaining_seeds()

    def skip_rows(self, start_row: int) -> None:
        self.context.skip_rows(start_row)
