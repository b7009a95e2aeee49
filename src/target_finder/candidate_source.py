"""
Candidate source backed by `bazel query`.

Lists test target labels from the build graph. One process per call,
no retries and no caching.
"""
import logging
import subprocess
from typing import Callable, List, Optional

from .config import TargetFinderConfig
from .exceptions import QueryFailedError

logger = logging.getLogger(__name__)


class BazelCandidateSource:
    """
    Lists candidate targets by running bazel query expressions.

    Usage:
        source = BazelCandidateSource(config)
        all_targets = source.list_test_targets()
    """

    def __init__(
        self,
        config: Optional[TargetFinderConfig] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        :param config: TargetFinderConfig instance (defaults if None)
        :param runner: subprocess.run compatible callable
        """
        self.config = config or TargetFinderConfig()
        self._runner = runner

    @property
    def test_targets_query(self) -> str:
        return f"tests({self.config.test_root})"

    @property
    def dynamic_testnet_query(self) -> str:
        return f"attr(tags, '{self.config.testnet_tag}', tests({self.config.test_root}))"

    def list_test_targets(self) -> List[str]:
        """
        List all test targets under the test root.

        :raises: QueryFailedError if bazel exits with a non-zero status
        """
        return self._query(self.test_targets_query)

    def list_dynamic_testnet_targets(self) -> List[str]:
        """
        List test targets tagged as requiring a dynamically provisioned testnet.

        :raises: QueryFailedError if bazel exits with a non-zero status
        """
        return self._query(self.dynamic_testnet_query)

    def _query(self, expression: str) -> List[str]:
        command = [self.config.bazel_binary, "query", expression]
        logger.debug("Running %s", " ".join(command))

        try:
            result = self._runner(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise QueryFailedError(command, str(exc)) from exc

        if result.returncode != 0:
            raise QueryFailedError(command, result.stderr or "")

        targets = parse_query_output(result.stdout or "")
        logger.debug("Query %r returned %d targets", expression, len(targets))
        return targets


def parse_query_output(output: str) -> List[str]:
    """Split query output into labels, dropping empty lines."""
    return [line for line in output.splitlines() if line]
