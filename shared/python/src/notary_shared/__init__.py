"""
notary_shared — shared configuration, constants, time helpers and DTOs for the notary platform.

Usage:
    from notary_shared.config import settings
    from notary_shared.models.records import Record, RecordCreate
    from notary_shared.time_utils import is_outside_working_hours
    from notary_shared.constants import CONTRACT_TYPES, DESTINATION_DISTANCES_KM
"""

__version__ = "0.1.0"
