"""显示模块"""
from .adapters import DisplayAdapter, ConsoleDisplay, HtmlStackDisplay, RecordingDisplay

__all__ = ['DisplayAdapter', 'ConsoleDisplay', 'HtmlStackDisplay', 'RecordingDisplay']
