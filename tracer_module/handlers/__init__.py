"""Handlers module - Log output handlers"""

from tracer_module.handlers.base_handler import BaseHandler
from tracer_module.handlers.callback_handler import CallbackHandler
from tracer_module.handlers.console_handler import ConsoleHandler, SimpleConsoleHandler
from tracer_module.handlers.directory_handler import DirectoryFileHandler
from tracer_module.handlers.file_handler import FileHandler

__all__ = [
    "BaseHandler",
    "CallbackHandler",
    "ConsoleHandler",
    "SimpleConsoleHandler",
    "DirectoryFileHandler",
    "FileHandler",
]
