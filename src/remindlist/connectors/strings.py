# src/remindlist/connectors/strings.py

from __future__ import annotations

from ..tasks.task_models import Locale

STRINGS: dict[str, dict[Locale, str]] = {
    "LIST_TITLE": {
        Locale.BR: "Lista de lembretes",
        Locale.EN: "Reminder list",
    },
    "EMPTY_LIST": {
        Locale.BR: "Nenhum lembrete por aqui",
        Locale.EN: "No reminders yet",
    },
    "EDIT_MODE_ON": {
        Locale.BR: "Modo de edição: LIGADO",
        Locale.EN: "Edit mode: ON",
    },
    "NOT_FOUND": {
        Locale.BR: "Não encontrado",
        Locale.EN: "Not found",
    },
    "PROMPT": {
        Locale.BR: "Digite aqui seu lembrete",
        Locale.EN: "Type your reminder here",
    },
}


def t(key: str, locale: Locale) -> str:
    table = STRINGS[key]
    return table.get(locale) or table[Locale.EN]
