"""
Base model for decoded Atlassian Document Format values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ADFModel(BaseModel):
    """
    Base class for ADF models.

    Models are frozen: a decoded document is not edited while it is rendered.
    Subclasses decode raw JSON with ``from_api_response`` and serialize back
    with ``to_api_dict``.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ADFModel":
        """
        Create a model instance from a raw ADF value.

        Args:
            data: The JSON-decoded value from a Jira or Confluence response
            **kwargs: Additional context parameters

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_api_dict(self) -> dict[str, Any]:
        """
        Convert the model back to its ADF JSON form.

        Returns:
            A JSON-ready dictionary
        """
        raise NotImplementedError("Subclasses must implement to_api_dict")
