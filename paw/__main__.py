# Copyright 2025 Loopper-AI
# Module entry point for ``python -m paw``

from .cli import main

if __name__ == "__main__":
    main()
