"""
TSPL Handler
============

Handler for TSPL label printers (TSC, Gprinter and compatibles) printing
product price labels on 50x38mm stock.

Key Commands:
- SIZE w,h          - Label size in mm
- GAP g,o           - Gap between labels
- DIRECTION n       - Print direction
- CLS               - Clear image buffer
- TEXT x,y,...      - Print text
- BAR x,y,w,h       - Draw a filled bar
- BARCODE x,y,...   - Print barcode
- PRINT m,n         - Print labels

Label layout (dots, 203 dpi):
    y=18   shop name (font 3)
    y=48   separator bar
    y=58   product name
    y=83   variant - size
    y=110  MRP (struck through when discounted)
    y=136  discount price (optional)
    y=168  code-brand
    y=185  code 128 barcode, 100 dots high
    y=292  barcode text
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .base import BaseHandler
from ..config import LABEL_GAP_MM, LABEL_GAP_OFFSET_MM, LABEL_HEIGHT_MM, LABEL_WIDTH_MM
from ..device import UsbGateway
from ..exceptions import InvalidRequest
from ..formatting import format_money, stringify
from ..models import LabelItem

logger = logging.getLogger(__name__)


@dataclass
class LabelBatch:
    """TSPL blocks ready to send, one per printable label."""

    blocks: List[bytes] = field(default_factory=list)
    skipped: int = 0


def _quote(value: Any) -> str:
    """Escape a value for use inside a TSPL string literal."""
    return stringify(value).replace('"', '\\["]')


class TSPLHandler(BaseHandler):
    """Handler for TSPL price labels."""

    def _text(self, x: int, y: int, font: str, content: Any) -> str:
        # TEXT x,y,"font",rotation,x_multiplication,y_multiplication,"content"
        return f'TEXT {x},{y},"{font}",0,1,1,"{_quote(content)}"'

    def label_commands(self, item: LabelItem) -> List[str]:
        """TSPL commands for one label."""
        commands = [
            f'SIZE {LABEL_WIDTH_MM} mm,{LABEL_HEIGHT_MM} mm',
            f'GAP {LABEL_GAP_MM} mm,{LABEL_GAP_OFFSET_MM} mm',
            'DIRECTION 0',
            'CLS',
            self._text(10, 18, '3', item.shopname),
            'BAR 0,48,400,2',
            self._text(10, 58, '2', item.product_name),
            self._text(10, 83, '2', item.variant_text()),
            self._text(10, 110, '2', f'MRP Rs.{format_money(item.sprice)}'),
        ]

        if item.has_discount:
            commands.extend([
                'BAR 10,116,220,4',
                self._text(10, 136, '2', f'Discount Rs.{item.discount_price()}'),
            ])

        commands.extend([
            self._text(10, 168, '1', f'{item.code}-{item.brand}'),
            # BARCODE x,y,"type",height,readable,rotation,narrow,wide,"data"
            f'BARCODE 10,185,"128",100,0,0,3,3,"{_quote(item.barcode)}"',
            self._text(10, 292, '1', item.barcode),
            'PRINT 1,1',
        ])
        return commands

    def build_label(self, item: LabelItem) -> bytes:
        return ('\r\n'.join(self.label_commands(item)) + '\r\n').encode('utf-8')

    def parse(self, data: Any) -> List[Any]:
        if not isinstance(data, list) or not data:
            raise InvalidRequest('No label data provided')
        return data

    def build(self, items: List[Any]) -> LabelBatch:
        """Compose blocks in input order, skipping items that cannot be printed."""
        batch = LabelBatch()
        for index, raw in enumerate(items):
            if not isinstance(raw, dict):
                logger.warning('Skipping label %d: not an object', index)
                batch.skipped += 1
                continue

            item = LabelItem.from_dict(raw)
            missing = item.missing_fields()
            if missing:
                logger.warning('Skipping label %d due to missing required fields: %s',
                               index, ', '.join(missing))
                batch.skipped += 1
                continue

            batch.blocks.append(self.build_label(item))
        return batch

    def send(self, gateway: UsbGateway, job: LabelBatch) -> Dict[str, Any]:
        for block in job.blocks:
            gateway.write(block)

        logger.info('Sent %d label(s), skipped %d', len(job.blocks), job.skipped)
        return {
            'success': True,
            'printed': len(job.blocks),
            'skipped': job.skipped,
            'bytes_sent': sum(len(block) for block in job.blocks),
        }
