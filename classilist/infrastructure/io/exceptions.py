from ...domain.errors import ClassilistError


class DataSourceError(ClassilistError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class OutputTargetError(ClassilistError):
    pass
