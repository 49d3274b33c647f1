#
#
#

from octodns.provider import ProviderException


class LibdnsException(ProviderException):
    pass


# Well-known kinds, shared by every capability


class Unauthorized(LibdnsException):
    def __init__(self, msg='Unauthorized'):
        super().__init__(msg)


class NotFound(LibdnsException):
    def __init__(self, msg='Not Found'):
        super().__init__(msg)


class InvalidDomainName(LibdnsException):
    def __init__(self, msg='Invalid Domain Name'):
        super().__init__(msg)


class UnsupportedType(LibdnsException):
    def __init__(self, msg='Unsupported Record Type'):
        super().__init__(msg)


class InvalidRecord(LibdnsException):
    def __init__(self, msg='Invalid Record'):
        super().__init__(msg)


class Custom(LibdnsException):
    """Provider-specific failure outside the well-known kinds.

    ``detail`` holds whatever the provider reports, usually the underlying
    transport exception.
    """

    def __init__(self, detail):
        super().__init__(str(detail))
        self.detail = detail


KINDS = (
    Unauthorized,
    NotFound,
    InvalidDomainName,
    UnsupportedType,
    InvalidRecord,
)


# Capabilities


class RetrieveZoneError(LibdnsException):
    pass


class RetrieveZoneUnauthorized(RetrieveZoneError, Unauthorized):
    pass


class RetrieveZoneNotFound(RetrieveZoneError, NotFound):
    pass


class RetrieveZoneCustom(RetrieveZoneError, Custom):
    pass


class CreateZoneError(LibdnsException):
    pass


class CreateZoneUnauthorized(CreateZoneError, Unauthorized):
    pass


class CreateZoneInvalidDomainName(CreateZoneError, InvalidDomainName):
    pass


class CreateZoneCustom(CreateZoneError, Custom):
    pass


class DeleteZoneError(LibdnsException):
    pass


class DeleteZoneUnauthorized(DeleteZoneError, Unauthorized):
    pass


class DeleteZoneNotFound(DeleteZoneError, NotFound):
    pass


class DeleteZoneCustom(DeleteZoneError, Custom):
    pass


class RetrieveRecordError(LibdnsException):
    pass


class RetrieveRecordUnauthorized(RetrieveRecordError, Unauthorized):
    pass


class RetrieveRecordNotFound(RetrieveRecordError, NotFound):
    pass


class RetrieveRecordCustom(RetrieveRecordError, Custom):
    pass


class CreateRecordError(LibdnsException):
    pass


class CreateRecordUnauthorized(CreateRecordError, Unauthorized):
    pass


class CreateRecordUnsupportedType(CreateRecordError, UnsupportedType):
    pass


class CreateRecordInvalidRecord(CreateRecordError, InvalidRecord):
    pass


class CreateRecordCustom(CreateRecordError, Custom):
    pass


class DeleteRecordError(LibdnsException):
    pass


class DeleteRecordUnauthorized(DeleteRecordError, Unauthorized):
    pass


class DeleteRecordNotFound(DeleteRecordError, NotFound):
    pass


class DeleteRecordCustom(DeleteRecordError, Custom):
    pass


def error_for(capability, kind):
    """Look up the concrete error class of a capability.

    Args:
        capability: Capability error base, e.g. RetrieveZoneError
        kind: Well-known kind or Custom, e.g. NotFound

    Returns:
        The subclass of both, or None if the capability does not define
        that kind
    """
    for error_class in capability.__subclasses__():
        if issubclass(error_class, kind):
            return error_class
    return None


def recast(error, capability):
    """Re-express ``error`` as the same kind of ``capability``.

    Kinds the target capability does not define become its Custom error
    carrying the original one.
    """
    if isinstance(error, Custom):
        return error_for(capability, Custom)(error.detail)
    for kind in KINDS:
        if isinstance(error, kind):
            error_class = error_for(capability, kind)
            if error_class is not None:
                return error_class(*error.args)
    return error_for(capability, Custom)(error)
