"""Multipart form encoding for artifact uploads."""

import os

from urllib3.filepost import encode_multipart_formdata

from browserstack_xcuitest.constants import MULTIPART_FIELD_NAME
from browserstack_xcuitest.errors import FileReadError
from browserstack_xcuitest.models import EncodedBody


class MultipartEncoder:
    """Packs one local file into a single-field multipart/form-data body."""

    def __init__(self, field_name: str = MULTIPART_FIELD_NAME):
        self.field_name = field_name

    def encode_file(self, path: str) -> EncodedBody:
        try:
            with open(path, "rb") as file_obj:
                data = file_obj.read()
        except OSError as exc:
            raise FileReadError(path, exc) from exc

        filename = os.path.basename(path) or self.field_name
        body, content_type = encode_multipart_formdata(
            {self.field_name: (filename, data, "application/octet-stream")}
        )
        return EncodedBody(body=body, content_type=content_type)
