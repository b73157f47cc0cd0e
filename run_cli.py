import cli.cli

if __name__ == "__main__":
    cli.cli.main()
