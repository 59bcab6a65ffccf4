"""例外類別"""


class DialectPinError(Exception):
    """dialectpin 所有例外的基類"""


class SourceReadError(DialectPinError):
    """
    單一詞典來源無法讀取或解碼

    只記錄在 BuildReport 中，不會從 DictionaryTable.build() 拋出。
    """

    def __init__(self, source: str, cause: BaseException):
        self.source = source
        self.cause = cause
        super().__init__(f"Cannot load dictionary source {source!r}: {cause}")
