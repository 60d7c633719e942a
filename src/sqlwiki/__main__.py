from sqlwiki.cli import main

main()
