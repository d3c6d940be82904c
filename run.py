from datetime import datetime, timezone
import time

from dotenv import load_dotenv
import hydra
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig

from polywire.search import StochasticSearch
from polywire.utils.logger_setup import setup_logger
from polywire.utils.trackers import LogWriter, TBConfig, init_tb


def run_search(cfg: DictConfig) -> None:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("polywire stochastic search")
    logger.info("=" * 80)
    logger.info(f"Target exponents: {list(cfg.target)}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    writer: LogWriter | None = None
    if cfg.tensorboard.enabled:
        writer = init_tb(TBConfig(logdir=cfg.tensorboard.logdir))

    try:
        search = StochasticSearch(
            target=list(cfg.target),
            population_size=cfg.population_size,
            scoring_params=instantiate(cfg.scoring_params),
            noise_params=instantiate(cfg.noise_params),
            config=instantiate(cfg.search_config),
            writer=writer,
        )
        reports = search.train(cfg.iterations, cfg.cycles, cfg.clones)
    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        return
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Search failed: {e}")
        raise
    finally:
        if writer is not None:
            writer.close()
        duration = time.time() - start_time
        logger.info(f"Total duration: {duration:.2f} seconds")

    if reports:
        last = reports[-1]
        logger.info(
            f"Best fitness {last.best_fitness:.4f}, "
            f"exact recoveries {last.exact_recoveries}"
        )
    if search.best_wiring is not None:
        logger.info(f"Best wiring: {search.best_wiring.tolist()}")


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    load_dotenv()

    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(
        "Working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    run_search(cfg)


if __name__ == "__main__":
    main()
