import sys
from greensplit.main import main

sys.exit(main())
