# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from mococp import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = configuration.get_default_configuration()
        if loaded is not None:
            # Keys missing from older config files keep their defaults
            self._config.update(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        moco_company: Optional[str] = None,
        moco_api_key: Optional[str] = None,
        moco_bot_api_key: Optional[str] = None,
        moco_user_id: Optional[int] = None,
        jira_tempo_api_key: Optional[str] = None,
        week_start: Optional[configuration.WeekStart] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.is_dirty = True

        if moco_company is not None:
            self.config["moco_company"] = moco_company
        if moco_api_key is not None:
            self.config["moco_api_key"] = moco_api_key
        if moco_bot_api_key is not None:
            self.config["moco_bot_api_key"] = moco_bot_api_key
        if moco_user_id is not None:
            self.config["moco_user_id"] = moco_user_id
        if jira_tempo_api_key is not None:
            self.config["jira_tempo_api_key"] = jira_tempo_api_key
        if week_start is not None:
            self.config["week_start"] = week_start
        if request_timeout is not None:
            self.config["request_timeout"] = request_timeout


CONFIGURATION_REPO = ConfigurationRepository()
