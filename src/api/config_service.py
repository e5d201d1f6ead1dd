"""Load, save and reset the mount manager configuration."""

from __future__ import annotations

import logging

from api.codec import encode_payload
from api.commands import CommandSet
from api.executor import Executor, read_output, run_write
from errors import ClientError
from model import AppConfig
from model.schema import parse_json_object

log = logging.getLogger(__name__)


class ConfigService:
    """Configuration round trips through the mount manager binary.

    Reads are fail-soft (defaults on any failure); writes raise.
    """

    def __init__(self, executor: Executor | None, commands: CommandSet) -> None:
        self.executor = executor
        self.commands = commands

    async def load(self) -> AppConfig:
        """Load the persisted config merged over the compiled-in defaults.

        Never raises: a missing capability, a non-zero exit or unparseable
        output all yield the default record.
        """
        try:
            output = await read_output(self.executor, self.commands.show_config())
            remote = parse_json_object(output)
            return AppConfig.from_dict(remote)
        except ClientError as e:
            log.warning(f"Using default config: {e}")
        except OSError as e:
            log.warning(f"Using default config, show-config failed: {e}")
        return AppConfig.defaults()

    async def save(self, config: AppConfig) -> None:
        """Persist config.

        Raises:
            CapabilityAbsentError: If there is no execution capability
            RemoteFailureError: If save-config exits non-zero
        """
        payload = encode_payload(config.to_dict())
        await run_write(self.executor, self.commands.save_config(payload), "save config")
        log.info("Config saved")

    async def reset(self) -> None:
        """Regenerate the config file from the binary's defaults.

        Raises:
            CapabilityAbsentError: If there is no execution capability
            RemoteFailureError: If gen-config exits non-zero
        """
        await run_write(self.executor, self.commands.gen_config(), "reset config")
        log.info("Config reset")
