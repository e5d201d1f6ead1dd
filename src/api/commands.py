"""Argument vectors for every command issued over the execution capability."""

from __future__ import annotations

from dataclasses import dataclass

from constants import HYMOFS_LKM_NAME
from settings import Settings

SYSTEM_FACTS_SCRIPT = 'echo "KERNEL:$(uname -r)"; echo "SELINUX:$(getenforce)"'


@dataclass(frozen=True)
class CommandSet:
    """Builds argv lists for the mount manager binary and system queries."""

    binary: str
    state_file: str
    module_dir: str

    @classmethod
    def from_settings(cls, settings: Settings) -> CommandSet:
        return cls(
            binary=settings.binary,
            state_file=settings.state_file,
            module_dir=settings.module_dir,
        )

    # Mount manager binary

    def show_config(self) -> list[str]:
        return [self.binary, "show-config"]

    def save_config(self, payload: str) -> list[str]:
        return [self.binary, "save-config", "--payload", payload]

    def gen_config(self) -> list[str]:
        return [self.binary, "gen-config"]

    def modules(self) -> list[str]:
        return [self.binary, "modules"]

    def save_module_rules(self, module_id: str, payload: str) -> list[str]:
        return [self.binary, "save-module-rules", "--module", module_id, "--payload", payload]

    # Files

    def read_state(self) -> list[str]:
        return ["cat", self.state_file]

    def read_file(self, path: str) -> list[str]:
        return ["cat", path]

    def read_version(self) -> list[str]:
        return ["grep", "^version=", f"{self.module_dir}/module.prop"]

    # System

    def system_facts(self) -> list[str]:
        return ["sh", "-c", SYSTEM_FACTS_SCRIPT]

    def getprop(self, name: str) -> list[str]:
        return ["getprop", name]

    def kernel_release(self) -> list[str]:
        return ["uname", "-r"]

    def open_link(self, url: str) -> list[str]:
        return ["am", "start", "-a", "android.intent.action.VIEW", "-d", url]

    def reboot(self) -> list[str]:
        return ["reboot"]

    def unload_hymofs(self) -> list[str]:
        return ["rmmod", HYMOFS_LKM_NAME]
