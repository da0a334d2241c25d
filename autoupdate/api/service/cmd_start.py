"""Service start command - writes the launcher and plist and loads the agent."""

from collections.abc import Iterator

from ..config.AutoupdateConfig import AutoupdateConfig
from ..StageResult import StageResult
from ...utils.get_logger import get_logger
from . import ServiceStartOutput
from .AlreadyRunningError import AlreadyRunningError
from .Service import Service
from .UpdateOptions import UpdateOptions


def cmd_start(upgrade: bool = False, cleanup: bool = False, greedy: bool = False) -> StageResult:
    """Install the updater agent and load it into launchd.

    ``cleanup`` and ``greedy`` are ignored unless ``upgrade`` is set. Fails
    without touching any file if the agent is already loaded.
    """
    options = UpdateOptions(upgrade=upgrade, cleanup=cleanup, greedy=greedy)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        log = get_logger("service.start")

        def fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = ServiceStartOutput(
                errors=[message],
                warnings=[],
                message=message,
                label="",
                plist_path="",
                script_path="",
                options=options.effective_flags(),
                loaded=False,
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = AutoupdateConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        yield (0.4, "Writing launcher and service definition...")
        try:
            with Service(config.service) as service:
                result = service.install_service(options)
        except AlreadyRunningError as e:
            yield (1.0, "Complete")
            log.warning(str(e))
            fail(str(e))
            return
        except Exception as e:
            yield (1.0, "Complete")
            log.exception("Error starting autoupdate")
            fail(f"Error starting autoupdate: {e}")
            return

        yield (1.0, "Complete")
        if result["loaded"]:
            message = "Homebrew will now automatically update every 24 hours, or on system boot."
        else:
            message = "Autoupdate files were written but launchd did not load them. Re-run `autoupdate start` to retry."
        result_obj.result = message
        result_obj.output = ServiceStartOutput(
            errors=[],
            warnings=result["warnings"],
            message=message,
            label=result["label"],
            plist_path=result["plist_path"],
            script_path=result["script_path"],
            options=options.effective_flags(),
            loaded=result["loaded"],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Starting autoupdate...",
        progress_callback=do_work,
    )
