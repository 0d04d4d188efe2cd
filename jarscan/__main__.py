from jarscan.cli import main

main()
