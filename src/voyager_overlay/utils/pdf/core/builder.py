"""
PDF object builder: wraps content streams into pages sharing one Type1 font.
"""

from __future__ import annotations

from typing import List

from voyager_overlay.utils.pdf.core.content_stream import fmt

FONT_OBJ_ID = 3
FIRST_PAGE_OBJ_ID = 4


def build_pdf_bytes(
    content_streams: List[str],
    page_size: tuple[float, float] = (612, 792),
    font_name: str = "F1",
    base_font: str = "Helvetica",
) -> bytes:
    """
    Given list of page content streams (str), return ready-to-write PDF bytes.
    """
    streams_bytes = [s.encode("ascii", "ignore") for s in content_streams]

    font_obj = (
        f"{FONT_OBJ_ID} 0 obj << /Type /Font /Subtype /Type1 /Name /{font_name} "
        f"/BaseFont /{base_font} /Encoding /WinAnsiEncoding >> endobj\n"
    ).encode("ascii")
    media_box = f"[0 0 {fmt(page_size[0])} {fmt(page_size[1])}]"
    resources = f"<< /ProcSet [/PDF /Text] /Font << /{font_name} {FONT_OBJ_ID} 0 R >> >>"

    page_objs: list[bytes] = []
    pages_kids: list[int] = []
    next_obj_id = FIRST_PAGE_OBJ_ID
    for stream in streams_bytes:
        content_id = next_obj_id
        page_id = next_obj_id + 1
        pages_kids.append(page_id)
        page_objs.append(
            f"{content_id} 0 obj << /Length {len(stream)} >> stream\n".encode("ascii") + stream + b"\nendstream endobj\n"
        )
        page_objs.append(
            f"{page_id} 0 obj << /Type /Page /Parent 2 0 R /MediaBox {media_box} /Contents {content_id} 0 R /Resources {resources} >> endobj\n".encode(
                "ascii"
            )
        )
        next_obj_id += 2

    kids_ref = " ".join(f"{kid} 0 R" for kid in pages_kids)
    pages_obj = f"2 0 obj << /Type /Pages /Count {len(pages_kids)} /Kids [{kids_ref}] >> endobj\n".encode("ascii")
    catalog_obj = b"1 0 obj << /Type /Catalog /Pages 2 0 R >> endobj\n"

    objs = [catalog_obj, pages_obj, font_obj] + page_objs

    header = b"%PDF-1.4\n"
    offsets = [0]
    pdf_body = bytearray()
    current_offset = len(header)
    for obj in objs:
        offsets.append(current_offset)
        pdf_body += obj
        current_offset += len(obj)

    xref_entries = ["0000000000 65535 f \n"] + [_format_xref_entry(off) for off in offsets[1:]]
    xref = ("xref\n0 %d\n" % len(offsets)).encode("ascii") + "".join(xref_entries).encode("ascii")
    startxref = len(header) + len(pdf_body)
    trailer = f"trailer << /Size {len(offsets)} /Root 1 0 R >>\nstartxref\n{startxref}\n%%EOF\n".encode("ascii")

    return header + bytes(pdf_body) + xref + trailer


def _format_xref_entry(offset: int) -> str:
    return f"{offset:010d} 00000 n \n"
