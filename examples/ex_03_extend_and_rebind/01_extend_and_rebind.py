"""Extenders decorate instances; rebinding listeners follow replacements."""

from __future__ import annotations

from bindwire import Container


class Mailer:
    def send(self, message: str) -> str:
        return message


class LoggingMailer(Mailer):
    def __init__(self, inner: Mailer) -> None:
        self.inner = inner

    def send(self, message: str) -> str:
        return f"[logged] {self.inner.send(message)}"


class Newsletter:
    def __init__(self) -> None:
        self.mailer: Mailer | None = None

    def use_mailer(self, mailer: Mailer) -> None:
        self.mailer = mailer


def main() -> None:
    container = Container()
    container.singleton(Mailer)

    newsletter = Newsletter()
    newsletter.use_mailer(container.refresh(Mailer, newsletter, "use_mailer"))
    print(f"before={newsletter.mailer.send('hi')}")  # => before=hi

    container.extend(Mailer, lambda mailer, container: LoggingMailer(mailer))
    print(f"after={newsletter.mailer.send('hi')}")  # => after=[logged] hi


if __name__ == "__main__":
    main()
