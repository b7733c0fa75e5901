from spmrun.cli import main

main()
