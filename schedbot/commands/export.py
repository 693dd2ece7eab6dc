from __future__ import annotations

import logging

from ..errors import ErrorType, ExportError, get_error_message
from ..nlp.extractor import ExportFormat, detect_export_format
from .results import CommandContext, Handled, HandlerResult

logger = logging.getLogger(__name__)


def handle_export(ctx: CommandContext) -> HandlerResult:
    schedules = ctx.state.schedules
    if not schedules:
        return Handled("📁 Tidak ada jadwal untuk diekspor.")
    if ctx.exporter is None:
        return Handled(get_error_message(ErrorType.EXPORT_FAILED, "export tidak tersedia"))

    export_format = detect_export_format(ctx.message)
    try:
        if export_format is ExportFormat.TEXT:
            filename = ctx.exporter.export_text(schedules, ctx.now)
            return Handled(f"✅ File text diekspor: {filename}")

        if export_format is ExportFormat.CSV:
            filename = ctx.exporter.export_csv(schedules, ctx.now)
            return Handled(f"✅ CSV diekspor: {filename}")

        if export_format is ExportFormat.BACKUP:
            filename = ctx.exporter.create_backup(ctx.state, ctx.now)
            return Handled(f"✅ Backup dibuat: {filename}")

        csv_name = ctx.exporter.export_csv(schedules, ctx.now)
        backup_name = ctx.exporter.create_backup(ctx.state, ctx.now)
        return Handled(
            "📁 EXPORT LENGKAP:\n"
            f"✅ CSV diekspor: {csv_name}\n"
            f"✅ Backup dibuat: {backup_name}"
        )
    except ExportError as e:
        return Handled(get_error_message(ErrorType.EXPORT_FAILED, str(e)))
