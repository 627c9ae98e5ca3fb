from abc import ABC, abstractmethod
from nail_salon.session.contracts import RgbColor

class UploadAdapter(ABC):
    @abstractmethod
    def submit(self, image: bytes, color: RgbColor,
               filename: str = "hand.jpg", content_type: str = "image/jpeg") -> bytes:
        """Send one photo + color, return the processed image bytes.

        Raises ServerError on a non-200 answer and TransportError when no
        usable answer arrives.
        """
        ...

    def reachable(self) -> bool:
        return True
