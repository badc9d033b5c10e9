"""例外定義。"""

from __future__ import annotations


class PagingMediatorError(Exception):
    """ライブラリ例外の基底クラス。

    Attributes:
        origin: 例外発生元。
    """

    def __init__(self, message: str, *, origin: str) -> None:
        super().__init__(message)
        self.origin = origin


class PagingError(PagingMediatorError):
    """取得関数由来のエラー。

    get_results() の結果として値で返される。メッセージ以外の情報は持たない。

    Attributes:
        message: エラーメッセージ。
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, origin="fetch")
        self.message = message


class PagingValidationError(PagingMediatorError):
    """構築時・呼び出し時の引数バリデーションエラー。"""

    def __init__(self, message: str, *, validation_code: str) -> None:
        super().__init__(message, origin="client_validation")
        self.validation_code = validation_code

