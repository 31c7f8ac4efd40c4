"""Upload a local file and wait until the file service has processed it."""

import asyncio
import logging
from typing import Any

from google import genai
from google.genai import types

from maestro.core.config import settings
from maestro.core.errors import AttachmentFailed, AttachmentTimeout
from maestro.models.chat import Attachment, AttachmentState

logger = logging.getLogger(__name__)


def _map_state(state: Any) -> AttachmentState:
    """Translate the SDK's FileState into the attachment state.

    A missing or unspecified state is treated as still processing.
    """
    value = getattr(state, "value", state)
    value = str(value).upper() if value is not None else ""
    if value == "ACTIVE":
        return "active"
    if value == "FAILED":
        return "failed"
    return "processing"


class AttachmentUploader:
    """Drives upload + poll-until-ready for a single file.

    The poll loop sleeps ``poll_interval`` seconds between fetches and gives up
    after ``max_poll_attempts`` fetches. The sleep is where cancellation of
    the awaiting task lands.
    """

    def __init__(
        self,
        client: genai.Client,
        poll_interval: float | None = None,
        max_poll_attempts: int | None = None,
        display_name: str | None = None,
    ) -> None:
        self._client = client
        self.poll_interval = settings.upload_poll_interval if poll_interval is None else poll_interval
        self.max_poll_attempts = (
            settings.upload_max_poll_attempts if max_poll_attempts is None else max_poll_attempts
        )
        self.display_name = display_name or settings.upload_display_name

    async def upload(self, local_path: str) -> Attachment:
        """Upload ``local_path`` and return it once the service reports it active.

        Raises:
            AttachmentFailed: The upload call raised, or the service marked the file failed.
            AttachmentTimeout: The file was still processing after max_poll_attempts fetches.
        """
        try:
            handle = await self._client.aio.files.upload(
                file=local_path,
                config=types.UploadFileConfig(display_name=self.display_name),
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"File upload failed for {local_path}: {e}", exc_info=True)
            raise AttachmentFailed(f"Upload of '{local_path}' failed: {e}") from e

        attachment = self._to_attachment(local_path, handle)
        logger.info(f"Uploaded {local_path} as {attachment.name} (state={attachment.state})")

        attempts = 0
        while attachment.state == "processing":
            if attempts >= self.max_poll_attempts:
                logger.warning(
                    f"File {attachment.name} still processing after {attempts} polls"
                )
                raise AttachmentTimeout(
                    f"File '{attachment.name}' was not ready after {attempts} polls",
                    file_name=attachment.name,
                )
            await asyncio.sleep(self.poll_interval)
            attempts += 1
            try:
                handle = await self._client.aio.files.get(name=attachment.name)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Polling file {attachment.name} failed: {e}", exc_info=True)
                raise AttachmentFailed(
                    f"Polling file '{attachment.name}' failed: {e}",
                    file_name=attachment.name,
                ) from e
            attachment = self._to_attachment(local_path, handle)

        if attachment.state == "failed":
            error = getattr(handle, "error", None)
            detail = getattr(error, "message", None) or "processing failed"
            logger.error(f"File {attachment.name} failed processing: {detail}")
            raise AttachmentFailed(
                f"File '{attachment.name}' failed processing: {detail}",
                file_name=attachment.name,
            )

        logger.info(f"File {attachment.name} active after {attempts} polls ({attachment.mime_type})")
        return attachment

    @staticmethod
    def _to_attachment(local_path: str, handle: types.File) -> Attachment:
        return Attachment(
            local_path=local_path,
            name=handle.name,
            remote_uri=handle.uri,
            mime_type=handle.mime_type,
            state=_map_state(handle.state),
        )
