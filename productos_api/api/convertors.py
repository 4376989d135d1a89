from starlette.convertors import Convertor, register_url_convertor


class SignedIntConvertor(Convertor):
    """Entero con signo en la ruta (`-1`, `0`, `42`)."""

    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


register_url_convertor("signed_int", SignedIntConvertor())
