"""CallableResult model for the form-scan callable protocol."""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class CallableResult(BaseModel):
    """Result returned by the form-scan execute() interface.

    Attributes:
        schema_version: Version of the CallableResult schema.
        items: One serialized ScanResult per scanned form, in input order.
        stats: Processing statistics.
    """

    schema_version: str = "1.0"
    items: list[dict]
    stats: dict = {}

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_stats_counts(self) -> CallableResult:
        """Ensure the output count, when reported, matches the items."""
        output = self.stats.get("output")
        if output is not None and output != len(self.items):
            raise ValueError(
                f"stats.output is {output} but {len(self.items)} items were returned"
            )
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary, omitting empty stats."""
        result: dict = {"schema_version": self.schema_version, "items": self.items}
        if self.stats:
            result["stats"] = self.stats
        return result
