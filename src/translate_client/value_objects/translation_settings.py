"""Settings attached to a TranslateText call."""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..enums import Formality, Profanity
from ..exceptions import InvalidArgument


class TranslationSettings(BaseModel):
    """Formality level and profanity masking applied to the translated text.

    Values are only checked against their enums when the settings are
    serialized, so an instance may hold an unsupported value until then.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    formality: Optional[str] = Field(None, alias="Formality", description="FORMAL or INFORMAL")
    profanity: Optional[str] = Field(None, alias="Profanity", description="MASK to mask profane words")

    @classmethod
    def create(cls, input: Union["TranslationSettings", Dict[str, Any]]) -> "TranslationSettings":
        return input if isinstance(input, cls) else cls.model_validate(input)

    def get_formality(self) -> Optional[str]:
        return self.formality

    def get_profanity(self) -> Optional[str]:
        return self.profanity

    def request_body(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.formality is not None:
            if not Formality.exists(self.formality):
                raise InvalidArgument(
                    f'Invalid parameter "Formality" for "{type(self).__name__}". '
                    f'The value "{self.formality}" is not a valid "Formality".'
                )
            payload["Formality"] = Formality(self.formality).value
        if self.profanity is not None:
            if not Profanity.exists(self.profanity):
                raise InvalidArgument(
                    f'Invalid parameter "Profanity" for "{type(self).__name__}". '
                    f'The value "{self.profanity}" is not a valid "Profanity".'
                )
            payload["Profanity"] = Profanity(self.profanity).value

        return payload
