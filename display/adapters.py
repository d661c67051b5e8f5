"""显示适配器 - 只读取快照，不驱动任何逻辑"""
import sys
import logging

from config.config import DISPLAY_CONFIG, ENGINE_CONFIG

logger = logging.getLogger(__name__)


class DisplayAdapter:
    """显示适配器基类"""

    def render(self, snapshot):
        raise NotImplementedError

    def clear(self):
        pass


class ConsoleDisplay(DisplayAdapter):
    """把寄存器文本（以及可选的栈）写到终端"""

    def __init__(self, stream=None, show_stack=None):
        self.stream = stream if stream is not None else sys.stdout
        self.show_stack = DISPLAY_CONFIG["show_stack"] if show_stack is None else show_stack

    def render(self, snapshot):
        if self.show_stack and snapshot.entries:
            self.stream.write(f"{snapshot.pending:>30} | {snapshot.text}\n")
        else:
            self.stream.write(f"{snapshot.text}\n")


class HtmlStackDisplay(DisplayAdapter):
    """栈显示行：每个条目包在一个 <span> 里"""

    def __init__(self, max_entries=None):
        self.max_entries = max_entries or ENGINE_CONFIG["max_stack_render"]
        self.html = ""

    def render(self, snapshot):
        entries = snapshot.entries
        if len(entries) > self.max_entries:
            logger.debug(f"Stack has {len(entries)} entries, rendering the last {self.max_entries}")
            entries = entries[-self.max_entries:]
        if entries:
            self.html = "<span>" + "</span><span>".join(entry.html for entry in entries) + "</span>"
        else:
            self.html = ""

    def clear(self):
        self.html = ""


class RecordingDisplay(DisplayAdapter):
    """记录收到的所有快照（用于回放和测试）"""

    def __init__(self):
        self.snapshots = []
        self.clear_count = 0

    @property
    def last(self):
        return self.snapshots[-1] if self.snapshots else None

    def render(self, snapshot):
        self.snapshots.append(snapshot)

    def clear(self):
        self.clear_count += 1
