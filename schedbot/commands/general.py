from __future__ import annotations

from ..errors import ErrorType, get_error_message
from ..nlp.extractor import reflect_pronouns
from ..nlp.intents import Intent, resolve_ambiguous
from .results import CommandContext, Handled, HandlerResult
from .view import handle_stats, handle_view

HELP_TEXT = """🤖 SCHEDBOT - Bantuan Lengkap:

📝 MENGELOLA JADWAL:
   • Tambah: "Jadwalkan nonton malam ini jam 7", "Tambah rapat besok jam 9 pagi"
   • Lihat: "Lihat jadwal", "Lihat jadwal hari ini", "Lihat jadwal besok", "Jadwal semua"
   • Edit: "Ubah makan 08:00 jadi 10:00", "Ganti rapat ke besok"
   • Hapus: "Hapus makan 08:00", "Hapus semua jadwal makan", "Hapus semua"

🔍 PENCARIAN & REMINDER:
   • Cari: "Cari meeting", "Kapan ada rapat"
   • Reminder: "Reminder 1 jam", "Reminder satu hari ke depan"

📊 ANALISIS & EXPORT:
   • Statistik: "Berapa jadwal", "Statistik"
   • Export: "Export csv", "Export text", "Backup jadwal"

❓ BANTUAN: "help", "bantuan", "perintah"

💡 Tips:
   - Gunakan kata kunci spesifik untuk edit/hapus (misal: "ubah makan 08:00 jadi 10:00")
   - Untuk reminder, bisa pakai "1 jam" atau "satu jam"
   - Tanggal bisa ditulis "besok", "lusa", "senin", "minggu depan", "tanggal 12" atau "12/10"."""

CLARIFICATION_TEXT = (
    "🤖 Maksud Anda melihat jadwal atau menambahkan jadwal?\n"
    '   • Lihat: "Lihat jadwal hari ini"\n'
    '   • Tambah: "Tambah rapat besok jam 9"'
)


def handle_help(ctx: CommandContext) -> HandlerResult:
    return Handled(HELP_TEXT)


def handle_ambiguous(ctx: CommandContext) -> HandlerResult:
    resolved = resolve_ambiguous(ctx.message)
    if resolved is Intent.STATS:
        return handle_stats(ctx)
    if resolved is Intent.VIEW:
        return handle_view(ctx)
    return Handled(CLARIFICATION_TEXT)


def handle_unknown(ctx: CommandContext) -> HandlerResult:
    return Handled(get_error_message(ErrorType.UNKNOWN_COMMAND, reflect_pronouns(ctx.text)))
