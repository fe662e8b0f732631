from uniqopy.cli import app


def main():
    app(prog_name="uniqopy")


if __name__ == "__main__":
    main()
