from .ids import normalize_item_id, normalize_property_id, validate_statement_id

__all__ = ["normalize_item_id", "normalize_property_id", "validate_statement_id"]
