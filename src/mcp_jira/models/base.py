"""
Base model for the Jira API projections.

Every model is parsed from a raw REST payload with ``from_api_response``
and reduced to the tool response shape with ``to_simplified_dict``.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields for API responses
        """
        return self.model_dump(exclude_none=True)
