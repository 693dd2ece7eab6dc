import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the schedule store cannot be read or written."""


class ExportError(Exception):
    """Raised when an export or backup file cannot be written."""


class ErrorType(Enum):
    EMPTY_MESSAGE = "empty_message"
    MESSAGE_TOO_LONG = "message_too_long"
    UNKNOWN_COMMAND = "unknown_command"
    ADD_NOT_RECOGNIZED = "add_not_recognized"
    EDIT_NOT_RECOGNIZED = "edit_not_recognized"
    DELETE_NOT_RECOGNIZED = "delete_not_recognized"
    SEARCH_NOT_RECOGNIZED = "search_not_recognized"
    KEYWORD_TOO_SHORT = "keyword_too_short"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    NO_SCHEDULES = "no_schedules"
    SAVE_FAILED = "save_failed"
    EXPORT_FAILED = "export_failed"
    PROCESSING_ERROR = "processing_error"


def get_error_message(error_type: ErrorType, context: Optional[str] = None) -> str:
    """Return the plain-text reply for an error, filling in context where the message uses it."""
    logger.debug(f"Rendering error reply {error_type.value} - {context}")

    error_responses = {
        ErrorType.EMPTY_MESSAGE: _get_empty_message_message,
        ErrorType.MESSAGE_TOO_LONG: _get_message_too_long_message,
        ErrorType.UNKNOWN_COMMAND: _get_unknown_command_message,
        ErrorType.ADD_NOT_RECOGNIZED: _get_add_not_recognized_message,
        ErrorType.EDIT_NOT_RECOGNIZED: _get_edit_not_recognized_message,
        ErrorType.DELETE_NOT_RECOGNIZED: _get_delete_not_recognized_message,
        ErrorType.SEARCH_NOT_RECOGNIZED: _get_search_not_recognized_message,
        ErrorType.KEYWORD_TOO_SHORT: _get_keyword_too_short_message,
        ErrorType.VALIDATION_FAILED: _get_validation_failed_message,
        ErrorType.NOT_FOUND: _get_not_found_message,
        ErrorType.NO_SCHEDULES: _get_no_schedules_message,
        ErrorType.SAVE_FAILED: _get_save_failed_message,
        ErrorType.EXPORT_FAILED: _get_export_failed_message,
        ErrorType.PROCESSING_ERROR: _get_processing_error_message,
    }

    builder = error_responses.get(error_type)
    if builder is None:
        return _get_processing_error_message(context)
    return builder(context)


def _get_empty_message_message(context: Optional[str] = None) -> str:
    return '🤖 Pesan kosong. Ketik "bantuan" untuk melihat perintah yang tersedia.'


def _get_message_too_long_message(context: Optional[str] = None) -> str:
    if context:
        return f"❌ Pesan terlalu panjang. Maksimal {context} karakter."
    return "❌ Pesan terlalu panjang."


def _get_unknown_command_message(context: Optional[str] = None) -> str:
    return f'🤖 Maaf, saya tidak mengerti "{context or ""}". Ketik "bantuan" untuk melihat perintah yang tersedia.'


def _get_add_not_recognized_message(context: Optional[str] = None) -> str:
    return '❌ Format tambah jadwal tidak dikenali. Contoh: "Jadwalkan nonton malam ini jam 7"'


def _get_edit_not_recognized_message(context: Optional[str] = None) -> str:
    return '🤖 Perintah edit tidak dikenali. Format: "Ubah [jadwal lama] jadi [jadwal baru]".'


def _get_delete_not_recognized_message(context: Optional[str] = None) -> str:
    return '🤖 Perintah hapus tidak dikenali. Gunakan: "hapus [kata kunci]" atau "hapus semua".'


def _get_search_not_recognized_message(context: Optional[str] = None) -> str:
    return "🔍 Tidak ditemukan hasil untuk pencarian."


def _get_keyword_too_short_message(context: Optional[str] = None) -> str:
    return f'❌ Kata kunci "{context or ""}" terlalu pendek. Gunakan kata kunci yang lebih spesifik.'


def _get_validation_failed_message(context: Optional[str] = None) -> str:
    return f"❌ {context}" if context else "❌ Data jadwal tidak valid"


def _get_not_found_message(context: Optional[str] = None) -> str:
    return f'❌ Tidak ditemukan jadwal dengan kata kunci "{context or ""}"'


def _get_no_schedules_message(context: Optional[str] = None) -> str:
    return "📅 Belum ada jadwal yang tersimpan."


def _get_save_failed_message(context: Optional[str] = None) -> str:
    return "❌ Gagal menyimpan jadwal"


def _get_export_failed_message(context: Optional[str] = None) -> str:
    if context:
        return f"❌ Error saat export: {context}"
    return "❌ Error saat export."


def _get_processing_error_message(context: Optional[str] = None) -> str:
    return "❌ Terjadi kesalahan saat memproses pesan. Coba lagi nanti."
