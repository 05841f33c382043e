# -*- coding: utf-8 -*-
from pathlib import Path
import asyncio
import sys

if __package__ is None:
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from infra.config import DEFAULT_LANGUAGE
from infra.dictionaries import builtin_dictionaries
from infra.logging_config import setup_logging
from ui.localized_window import LocalizedWindow, register_window_actions
from ui.tk_bindings import create_localizer


def main():
    setup_logging()

    localizer = create_localizer()
    for dictionary in builtin_dictionaries():
        localizer.add_language_dictionary(dictionary)
    register_window_actions(localizer)

    # Elements created after this point are localized as they get their uid.
    asyncio.run(localizer.set_language(DEFAULT_LANGUAGE))

    with localizer:
        app = LocalizedWindow(localizer)
        app.mainloop()


if __name__ == "__main__":
    main()
