"""
Collection Errors

Every rejected operation raises one of these. Callers can rely on `code`
being stable; the message is for humans.
"""


class CollectionError(Exception):
    """Base exception for gemstone and goblet operations"""

    code = "CollectionError"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class NotAuthorized(CollectionError):
    """Caller lacks the rights for this operation"""

    code = "NotAuthorized"


class AlreadyAdmitted(CollectionError):
    code = "AlreadyAdmitted"


class UnknownGemType(CollectionError):
    code = "UnknownGemType"


class NotAdmitted(CollectionError):
    code = "NotAdmitted"


class AlreadyMinted(CollectionError):
    code = "AlreadyMinted"


class InsufficientBalance(CollectionError):
    code = "InsufficientBalance"


class InvalidAmount(CollectionError):
    code = "InvalidAmount"


class NotEligible(CollectionError):
    """Holder does not own an unredeemed instance of every gem type"""

    code = "NotEligible"


class NotEligibleToMintGoblet(NotEligible):
    code = "NotEligibleToMintGoblet"


class AlreadyMintedThisYear(CollectionError):
    code = "AlreadyMintedThisYear"


class OutOfMintingWindow(CollectionError):
    """Goblets cannot be minted anymore (or not yet)"""

    code = "OutOfMintingWindow"


class SupplyExhausted(CollectionError):
    code = "SupplyExhausted"


class UnknownToken(CollectionError):
    code = "UnknownToken"
