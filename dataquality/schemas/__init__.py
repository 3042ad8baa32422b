from dataquality.schemas.record import ConcessionRecord

__all__ = ["ConcessionRecord"]
