"""Type hints used in Club Pairing."""

from typing import Any, Mapping, Union

# A raw record as it comes out of storage
RawRecord = Mapping[str, Any]
# Anything the team builder and roster accept as a player record
RecordLike = Union["RegistrationRecord", RawRecord]

#  LocalWords:  RecordLike
