from __future__ import annotations

import io

import qrcode

from hotelbot.application.ports.code_generator import CodeGeneratorPort


class QRCodeGenerator(CodeGeneratorPort):
    def __init__(self, box_size: int = 10, border: int = 4) -> None:
        self._box_size = box_size
        self._border = border

    def encode(self, payload: str) -> bytes:
        qr = qrcode.QRCode(box_size=self._box_size, border=self._border)
        qr.add_data(payload)
        qr.make(fit=True)
        image = qr.make_image()
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
