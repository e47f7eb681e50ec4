# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Hestenes CLI Entry Point. Wedge two blades.

    python main.py lhs.scale=2 lhs.blade=[2,3] rhs.scale=3 rhs.blade=[1]
"""

import hydra
from omegaconf import DictConfig, OmegaConf
from hestenes.algebra import ExteriorAlgebra
from log import configure, get_logger

logger = get_logger(__name__)

FORMATS = {
    'unicode': (str, "∧"),
    'latex': (lambda blade: blade.to_latex(), "\\wedge"),
}


def _blade_value(value):
    # Hydra hands lists over as ListConfig
    if isinstance(value, int):
        return value
    return tuple(OmegaConf.to_container(value) if OmegaConf.is_config(value) else value)


def run(cfg: DictConfig):
    """Builds both operands from the config and returns their outer product.

    Args:
        cfg (DictConfig): dimension, field, device, format, lhs, rhs.

    Returns:
        ScaledBasisBlade: ``lhs ^ rhs``.
    """
    if cfg.format not in FORMATS:
        raise ValueError(f"Unknown format: {cfg.format}. Available: {list(FORMATS.keys())}")
    render, wedge = FORMATS[cfg.format]

    field_kwargs = {'device': cfg.get('device', 'cpu')} if cfg.field == 'tensor' else {}
    algebra = ExteriorAlgebra(cfg.dimension, field=cfg.field, **field_kwargs)

    a = algebra.blade(cfg.lhs.scale, _blade_value(cfg.lhs.blade))
    b = algebra.blade(cfg.rhs.scale, _blade_value(cfg.rhs.blade))
    c = a ^ b

    logger.info("%s %s %s = %s", render(a), wedge, render(b), render(c))
    return c


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    configure(level=cfg.get('log_level'))
    run(cfg)


if __name__ == "__main__":
    main()
