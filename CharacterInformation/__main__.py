import sys

from CharacterInformation.cli import main

sys.exit(main())
