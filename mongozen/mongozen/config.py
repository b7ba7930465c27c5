# Copyright 2026 The mongozen Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime configuration for mongozen tooling."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, resolve_log_level


@dataclass
class MongoZenConfig:
    """Settings shared by the file loaders and the command line tools."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'MongoZenConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('MONGOZEN_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('MONGOZEN_PRINT_LEVEL', 'WARNING'),
            cache_enabled=os.getenv('MONGOZEN_CACHE_ENABLED', 'true').lower() == 'true',
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_log_level(self.log_level, logging.INFO)
        stderr_level = resolve_log_level(self.print_level, logging.WARNING)

        configure_split_stream_logging(level=level, stderr_level=stderr_level)

        return logging.getLogger('mongozen')


# Global configuration instance
mongozen_config = MongoZenConfig.from_env()
