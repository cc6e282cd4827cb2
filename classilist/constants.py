class Defaults:
    COLUMN_SEPARATOR = ","
    MISSING_VALUE_PATTERN = ""
    QUOTE_BEGIN = '"'
    QUOTE_END = '"'
    QUOTE_REPLACEMENT = ""
    SEPARATOR_REPLACEMENT = ""
    DECIMAL_SEPARATOR = "."
    INPUT_ENCODING = "utf-8"
    CONFIG_FILE = "classilist.toml"


class HeaderNames:
    ROW_ID = "row ID"
    ACTUAL_PREFIX = "A-"
    PREDICTED = "Predicted"
    PROBABILITY_PREFIX = "P-"
    FEATURE_PREFIX = "F-"


class Patterns:
    PREDICTION_COLUMN = r"Prediction \(([^)]*)\)"
    PROBABILITY_COLUMN = r"P \({class_column}=([^)]*)\)"


class SettingsKeys:
    SEPARATOR = "colSeparator"
    QUOTE_BEGIN = "quoteBegin"
    QUOTE_END = "quoteEnd"
    QUOTE_REPLACEMENT = "quoteReplacement"
    QUOTE_MODE = "quoteMode"
    SEPARATOR_REPLACEMENT = "sepReplacePattern"
    REPLACE_SEPARATOR_IN_STRINGS = "ReplSepInStrings"
    COLUMN_HEADER = "writeColHeader"
    ROW_HEADER = "writeRowHeader"
    MISSING = "missing"
    DECIMAL_SEPARATOR = "decimalSeparator"
    LINE_ENDING = "lineEndingMode"
    CHARACTER_ENCODING = "charSet"
    FILE_NAME = "filename"
    OVERWRITE_POLICY = "fileOverwritePolicy"
    LEGACY_APPEND = "isAppendToFile"
