import sys

from npm_oidc_setup.cli import main

sys.exit(main())
