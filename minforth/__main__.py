from minforth.repl import cli_main

cli_main()
