from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from . import codec


class IbanDetails(BaseModel):
    """Derived properties of an IBAN, as reported by ``aioniban inspect``."""

    iban: str = Field(..., description="The IBAN string as given.")
    well_formed: bool = Field(..., description="Matches the XE IBAN structure.")
    valid_checksum: bool = Field(..., description="MOD 97-10 remainder is 1.")
    check_digits: str = Field(..., description="Two digits after the country code.")
    direct: bool = Field(..., description="Encodes a full address.")
    indirect: bool = Field(..., description="Encodes institution and client.")
    address: Optional[str] = Field(
        None, description="Checksum address for direct IBANs."
    )
    institution: str = Field("", description="Institution code of an indirect IBAN.")
    client: str = Field("", description="Client identifier of an indirect IBAN.")


class Iban(BaseModel):
    """
    Immutable wrapper around an IBAN string.

    The string is not validated on construction; call ``is_valid`` or
    ``has_valid_checksum`` when that matters.
    """

    model_config = ConfigDict(frozen=True)

    iban: str

    def __init__(self, iban: str, **data):
        super().__init__(iban=iban, **data)

    @classmethod
    def from_address(cls, address: str) -> "Iban":
        """Create an Iban from an Aion address."""
        return cls(codec.address_to_iban(address))

    # Kept under its web3 name for API compatibility
    from_ethereum_address = from_address

    @classmethod
    def from_bban(cls, bban: str) -> "Iban":
        return cls(codec.bban_to_iban(bban))

    @classmethod
    def create_indirect(
        cls, institution: Optional[str], identifier: Optional[str]
    ) -> "Iban":
        """Use institution and identifier to create a BBAN and then an IBAN."""
        return cls(codec.create_indirect(institution, identifier))

    def to_address(
        self, strict: bool = False, hash_name: Optional[str] = None
    ) -> Optional[str]:
        return codec.iban_to_address(self.iban, strict=strict, hash_name=hash_name)

    def is_valid(self) -> bool:
        return codec.is_valid(self.iban)

    def is_well_formed(self) -> bool:
        return codec.is_well_formed(self.iban)

    def has_valid_checksum(self) -> bool:
        return codec.has_valid_checksum(self.iban)

    def is_direct(self) -> bool:
        return codec.is_direct(self.iban)

    def is_indirect(self) -> bool:
        return codec.is_indirect(self.iban)

    def checksum(self) -> str:
        return codec.checksum_digits(self.iban)

    def institution(self) -> str:
        return codec.institution(self.iban)

    def client(self) -> str:
        return codec.client(self.iban)

    def details(self, hash_name: Optional[str] = None) -> IbanDetails:
        """Collect every derived property in one report."""
        address = None
        if self.is_direct() and self.is_well_formed():
            address = self.to_address(hash_name=hash_name)

        return IbanDetails(
            iban=self.iban,
            well_formed=self.is_well_formed(),
            valid_checksum=self.has_valid_checksum(),
            check_digits=self.checksum(),
            direct=self.is_direct(),
            indirect=self.is_indirect(),
            address=address,
            institution=self.institution(),
            client=self.client(),
        )

    def __str__(self) -> str:
        return self.iban
