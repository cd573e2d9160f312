class PairLookupError(Exception):
    """Base for every failure a pair lookup can report to the caller."""

    kind = "lookup_error"


class InvalidAddressFormat(PairLookupError):
    kind = "invalid_address_format"


class NotAContract(PairLookupError):
    kind = "not_a_contract"


class ContractCallFailed(PairLookupError):
    kind = "contract_call_failed"


class NetworkError(PairLookupError):
    kind = "network_error"


class DecodingError(PairLookupError):
    kind = "decoding_error"

    def __init__(
        self,
        message: str,
        call_index: int | None = None,
        signature: str | None = None,
        raw: bytes = b"",
    ):
        super().__init__(message)
        self.call_index = call_index
        self.signature = signature
        self.raw = raw
