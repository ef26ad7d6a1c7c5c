from abc import ABC, abstractmethod
import sys

from loguru import logger


class MailTemplate(ABC):
    @abstractmethod
    def generate(self) -> str:
        pass


class WelcomeMailTemplate(MailTemplate):
    def generate(self) -> str:
        return "Welcome aboard! Thanks for signing up!"


class NewsLetterMailTemplate(MailTemplate):
    def generate(self) -> str:
        return "Please enjoy our newsletter!"


class Mailer(ABC):
    """
    Creator side of the factory method.

    Subclasses decide which template gets built; send_mail stays the same
    for every kind of mail and only talks to the MailTemplate interface.
    """

    @abstractmethod
    def generate_mail_template(self) -> MailTemplate:
        pass

    def send_mail(self) -> str:
        template = self.generate_mail_template()
        logger.debug(
            f"[Mailer] {type(self).__name__} built {type(template).__name__}"
        )
        return f"Sending the following mail : {template.generate()}"


class WelcomeMailGenerator(Mailer):
    def generate_mail_template(self) -> MailTemplate:
        return WelcomeMailTemplate()


class NewsLetterMailGenerator(Mailer):
    def generate_mail_template(self) -> MailTemplate:
        return NewsLetterMailTemplate()


def client_code(mailer: Mailer):
    print(mailer.send_mail())


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    client_code(WelcomeMailGenerator())
    print("---")
    client_code(NewsLetterMailGenerator())
