"""Module scan and per-module mount rules."""

from __future__ import annotations

import logging

from api.codec import encode_payload
from api.commands import CommandSet
from api.executor import Executor, read_output, run_write
from errors import ClientError
from model import Module, ModuleRules
from model.schema import parse_json_array

log = logging.getLogger(__name__)


class ModuleService:
    """Lists modules and persists their rule sets."""

    def __init__(self, executor: Executor | None, commands: CommandSet) -> None:
        self.executor = executor
        self.commands = commands

    async def scan_modules(self) -> list[Module]:
        """Return the modules known to the mount manager.

        A failed scan gives []; a malformed entry is skipped on its own.
        """
        try:
            output = await read_output(self.executor, self.commands.modules())
            entries = parse_json_array(output)
        except (ClientError, OSError) as e:
            log.warning(f"Module scan failed: {e}")
            return []

        modules = []
        for index, entry in enumerate(entries):
            try:
                modules.append(Module.from_dict(entry))
            except ClientError as e:
                log.warning(f"Skipping malformed module entry {index}: {e}")

        # Ids are unique within a scan result; first occurrence wins
        seen: set[str] = set()
        unique = []
        for module in modules:
            if module.id in seen:
                log.warning(f"Dropping duplicate module id: {module.id}")
                continue
            seen.add(module.id)
            unique.append(module)
        return unique

    async def save_module_rules(self, module_id: str, rules: ModuleRules) -> None:
        """Persist the rule set of one module.

        The module id is passed as its own argument; only the rules are hex encoded.

        Raises:
            CapabilityAbsentError: If there is no execution capability
            RemoteFailureError: If save-module-rules exits non-zero
        """
        payload = encode_payload(rules.to_dict())
        await run_write(
            self.executor,
            self.commands.save_module_rules(module_id, payload),
            "save rules",
        )
        log.info(f"Rules saved for {module_id}")
