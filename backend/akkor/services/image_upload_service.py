"""
图片上传服务
将上传的文件逐个转发到 ImgBB 兼容图床，返回公开 URL
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import httpx

from akkor.config import settings
from akkor.exceptions import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ImageFile:
    """待上传的图片（与 web 框架解耦）"""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class ImageUploadService:
    """图床上传服务"""

    def __init__(
        self,
        upload_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.upload_url = upload_url or settings.IMGBB_URL
        self.api_key = api_key if api_key is not None else settings.IMGBB_KEY
        self.timeout = timeout or settings.IMGBB_TIMEOUT
        self.transport = transport

    def upload_images(self, files: Sequence[ImageFile]) -> List[str]:
        """上传全部图片，按输入顺序返回 URL；任一失败即中止"""
        if not files:
            raise ValidationError("未上传任何图片")

        urls = []
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            for image in files:
                urls.append(self._upload_one(client, image))

        logger.info(f"Uploaded {len(urls)} image(s)")
        return urls

    def _upload_one(self, client: httpx.Client, image: ImageFile) -> str:
        logger.info(f"Uploading {image.filename} ({len(image.content)} bytes)")
        params = {"key": self.api_key} if self.api_key else None
        try:
            resp = client.post(
                self.upload_url,
                params=params,
                files={"image": (image.filename, image.content, image.content_type)},
            )
        except httpx.HTTPError as e:
            logger.error(f"Image host unreachable for {image.filename}: {e}")
            raise UpstreamError(f"图片上传失败: {e}") from e

        try:
            payload = resp.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if resp.is_error or not payload.get("success"):
            error = payload.get("error")
            message = error.get("message") if isinstance(error, dict) else error
            message = message or f"图床返回 HTTP {resp.status_code}"
            logger.error(f"Image upload rejected for {image.filename}: {message}")
            raise UpstreamError(message)

        url = (payload.get("data") or {}).get("url")
        if not url:
            raise UpstreamError("图床响应缺少图片 URL")
        return url
