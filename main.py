# Copyright (c) 2018 Ultimaker B.V.
# !/usr/bin/env python
# -*- coding: utf-8 -*-
import logging
import os

from resizerBootstrap.BootstrapInvoker import BootstrapInvoker


def main() -> None:
    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(module)s:%(lineno)s: %(message)s",
                        level=os.getenv("LOGGING_LEVEL", "DEBUG"))

    logging.info("Starting resizer Mongo bootstrap...")
    BootstrapInvoker().run()
    logging.info("Done bootstrapping")


if __name__ == '__main__':
    main()
