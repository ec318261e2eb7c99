"""
Field synchronisation for a row version converter tool.

RowVersionForm holds the text of the four fields a converter UI shows
(Base64, ULong and Hexadecimal are editable, the byte list is read-only)
plus the message of its error bar. Editing one field converts it and
refreshes the others.
"""

from typing import Callable, Dict, Optional

from rowversion.converter import RowVersionConverter
from rowversion.models.result import RESULT_FIELDS, ConversionResult, InputType

FieldListener = Callable[[str, str], None]

BYTE_ARRAY_FIELD = "byte_array"


class RowVersionForm:
    """
    State of the converter tool's fields.

    Updates written back into the fields are reported to the optional
    listener as (field_name, text). A text change that arrives while those
    updates are being applied is ignored, so a UI that echoes every field
    change back into text_changed does not loop.

    Example:
        form = RowVersionForm()
        form.text_changed(InputType.ULONG, "43339131")
        form.hexadecimal     # "0x0000000002954D7B"
        form.text_changed(InputType.HEXADECIMAL, "0x1234")
        form.error_message   # "Invalid hexadecimal format"
        form.ulong           # ""
    """

    def __init__(
        self,
        converter: Optional[RowVersionConverter] = None,
        listener: Optional[FieldListener] = None,
    ):
        self.converter = converter or RowVersionConverter()
        self.listener = listener
        self.fields: Dict[str, str] = {name: "" for name in RESULT_FIELDS}
        self.error_message: Optional[str] = None
        self._is_updating = False

    @property
    def base64(self) -> str:
        return self.fields[InputType.BASE64.value]

    @property
    def ulong(self) -> str:
        return self.fields[InputType.ULONG.value]

    @property
    def hexadecimal(self) -> str:
        return self.fields[InputType.HEXADECIMAL.value]

    @property
    def byte_array(self) -> str:
        return self.fields[BYTE_ARRAY_FIELD]

    @property
    def has_error(self) -> bool:
        return self.error_message is not None

    def text_changed(self, input_type: InputType, text: str) -> Optional[ConversionResult]:
        """
        Handle a user edit of one editable field.

        Args:
            input_type: The field that was edited
            text: Its new text

        Returns:
            The conversion result, or None if the change was suppressed
            because the form is applying a previous result
        """
        if self._is_updating:
            return None

        self.fields[input_type.value] = text
        result = self.converter.convert(input_type, text)
        self._apply(input_type, result)
        return result

    def _apply(self, source: InputType, result: ConversionResult) -> None:
        self._is_updating = True
        try:
            if result.is_success:
                self._show_results(result)
            else:
                self._clear_all_except(source.value)
                self.error_message = result.error_message
        finally:
            self._is_updating = False

    def _show_results(self, result: ConversionResult) -> None:
        for name, text in result.as_dict().items():
            self._set_field(name, text)
        self.error_message = None

    def _clear_all_except(self, source_name: str) -> None:
        for name in RESULT_FIELDS:
            if name != source_name:
                self._set_field(name, "")

    def _set_field(self, name: str, text: str) -> None:
        self.fields[name] = text
        if self.listener is not None:
            self.listener(name, text)
