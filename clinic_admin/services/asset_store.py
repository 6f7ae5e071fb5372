import io
import logging

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader
from starlette.concurrency import run_in_threadpool

from ..core.config import settings
from ..core.errors import InternalError

logger = logging.getLogger(__name__)

class CloudinaryAssetStore:
    """Uploads doctor images to Cloudinary."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = settings.ASSET_UPLOAD_TIMEOUT,
    ):
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "CloudinaryAssetStore":
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_SECRET_KEY,
        )

    async def upload(self, content: bytes, filename: str) -> str:
        """Upload an image and return its ``secure_url``."""
        try:
            # The SDK is blocking
            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                io.BytesIO(content),
                resource_type="image",
                filename=filename,
                timeout=self.timeout,
            )
        except cloudinary.exceptions.Error as e:
            logger.error(f"Image upload failed: {str(e)}")
            raise InternalError(str(e)) from e

        secure_url = result.get("secure_url")
        if not secure_url:
            raise InternalError("Image upload returned no secure_url")

        return secure_url
