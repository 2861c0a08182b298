"""Input for the TranslateText operation."""

import logging
from typing import Any, Dict, List, Optional, Union
from pydantic import Field

from .base import Input
from ..exceptions import MissingRequiredField
from ..request import JSON_CONTENT_TYPE, Request, encode_json_body
from ..value_objects.translation_settings import TranslationSettings


logger = logging.getLogger("translate_client.input")


SERVICE_TARGET_PREFIX = "AWSShineFrontendService_20170701"


class TranslateTextRequest(Input):
    """Request to translate a single piece of text.

    Accepts the API's own key names (``Text``, ``TerminologyNames``,
    ``SourceLanguageCode``, ``TargetLanguageCode``, ``Settings``, ``@region``)
    as well as the Python field names. Unknown keys are ignored.
    """

    text: Optional[str] = Field(
        None,
        alias="Text",
        description="Text to translate, at most 5,000 bytes. Required.",
    )
    terminology_names: Optional[List[str]] = Field(
        None,
        alias="TerminologyNames",
        description="Terminology lists to apply. At most one list per request.",
    )
    source_language_code: Optional[str] = Field(
        None,
        alias="SourceLanguageCode",
        description="Language code of the source text. Required.",
    )
    target_language_code: Optional[str] = Field(
        None,
        alias="TargetLanguageCode",
        description="Language code of the translated text. Required.",
    )
    settings: Optional[TranslationSettings] = Field(
        None,
        alias="Settings",
        description="Formality and profanity options for the output.",
    )

    def get_text(self) -> Optional[str]:
        return self.text

    def get_terminology_names(self) -> List[str]:
        return list(self.terminology_names) if self.terminology_names is not None else []

    def get_source_language_code(self) -> Optional[str]:
        return self.source_language_code

    def get_target_language_code(self) -> Optional[str]:
        return self.target_language_code

    def get_settings(self) -> Optional[TranslationSettings]:
        return self.settings

    def set_text(self, value: Optional[str]) -> "TranslateTextRequest":
        self.text = value
        return self

    def set_terminology_names(self, value: List[str]) -> "TranslateTextRequest":
        self.terminology_names = list(value)
        return self

    def set_source_language_code(self, value: Optional[str]) -> "TranslateTextRequest":
        self.source_language_code = value
        return self

    def set_target_language_code(self, value: Optional[str]) -> "TranslateTextRequest":
        self.target_language_code = value
        return self

    def set_settings(
        self, value: Optional[Union[TranslationSettings, Dict[str, Any]]]
    ) -> "TranslateTextRequest":
        self.settings = TranslationSettings.create(value) if value is not None else None
        return self

    def request(self) -> Request:
        """Validate the input and build the descriptor for ``POST /``.

        Raises:
            MissingRequiredField: If Text, SourceLanguageCode or TargetLanguageCode is null
            InvalidArgument: If the settings hold an unsupported value
        """
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "X-Amz-Target": f"{SERVICE_TARGET_PREFIX}.TranslateText",
        }
        body = encode_json_body(self.request_body())

        logger.debug("Built %s request (%d body bytes)", headers["X-Amz-Target"], len(body))
        return Request(method="POST", uri="/", query={}, headers=headers, body=body)

    def request_body(self) -> Dict[str, Any]:
        owner = type(self).__name__
        payload: Dict[str, Any] = {}

        if self.text is None:
            raise MissingRequiredField("Text", owner)
        payload["Text"] = self.text

        if self.terminology_names is not None:
            payload["TerminologyNames"] = list(self.terminology_names)

        if self.source_language_code is None:
            raise MissingRequiredField("SourceLanguageCode", owner)
        payload["SourceLanguageCode"] = self.source_language_code

        if self.target_language_code is None:
            raise MissingRequiredField("TargetLanguageCode", owner)
        payload["TargetLanguageCode"] = self.target_language_code

        if self.settings is not None:
            payload["Settings"] = self.settings.request_body()

        return payload
