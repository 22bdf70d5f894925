"""Binary marshaling interface for storage and transport layers."""

from abc import ABC, abstractmethod


class BinaryMarshaler(ABC):
    """Abstract interface for models with a binary wire form."""

    @abstractmethod
    def marshal_binary(self) -> bytes | None:
        """Encode the model.

        Returns:
            Encoded bytes

        Raises:
            EncodeError: If the serializer fails
        """

    @abstractmethod
    def unmarshal_binary(self, data: bytes | str) -> None:
        """Replace the model's state with the decoded payload.

        The receiver is left unmodified when decoding fails.

        Args:
            data: Encoded payload

        Raises:
            DecodeError: If the payload cannot be decoded
        """
