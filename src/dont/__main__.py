from .cli import main

# The `dont` console script calls cli.main() directly; keep this module a
# bare delegate so both ways in exit, exec and report errors identically.
if __name__ == "__main__":
    main()
