"""
Application entry point when executed as a module, e.g.

.. code:: console

    python -m volbright.core vol up
"""

from .main import run

if __name__ == "__main__":
    run()
