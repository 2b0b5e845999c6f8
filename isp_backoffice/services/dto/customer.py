"""Customer request DTO."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict

from isp_backoffice.services.dto.fields import FieldReader

CNP_PATTERN = re.compile(r"^\d{13}$")
PHONE_PATTERN = re.compile(r"^\+?\d[\d ().-]{5,18}\d$")


@dataclass
class CustomerRequest:
    name: str
    fullname: str
    address: str
    phone: str
    cnp: str

    @classmethod
    def from_json(cls, data: Any) -> "CustomerRequest":
        reader = FieldReader(data)
        name = reader.text("name", 3, 20)
        fullname = reader.text("fullname", 3, 50)
        address = reader.text("address", 3, 100)
        phone = reader.text("phone", pattern=PHONE_PATTERN, pattern_message="Invalid phone number")
        cnp = reader.text("cnp", pattern=CNP_PATTERN, pattern_message="Must be exactly 13 digits")
        reader.raise_if_errors()
        return cls(name=name, fullname=fullname, address=address, phone=phone, cnp=cnp)

    def to_fields(self) -> Dict[str, Any]:
        return asdict(self)
