import click

from immutable_collections.utils import ensure_iterable, humanize_list, empty


class Terminal:
    """
    ANSI styling of the messages this package prints.
    """
    BOLD = '\033[1m'
    END = '\033[0m'
    BLUE = '\033[34m'
    YELLOW = '\033[33m'
    RED = '\033[31m'

    LEVEL_COLOR_MAP = {
        'info': BLUE,
        'warning': YELLOW,
        'error': RED,
    }

    BOLD_STYLE = "bold"
    STYLES = (BOLD_STYLE, )

    @classmethod
    def get_styles(cls, style=None, bold=empty):
        styles = ensure_iterable(style)
        if bold is True and cls.BOLD_STYLE not in styles:
            styles.append(cls.BOLD_STYLE)
        elif bold is False:
            styles = [s for s in styles if s != cls.BOLD_STYLE]

        invalid = [s for s in styles if s not in cls.STYLES]
        if invalid:
            raise ValueError(
                f"The provided style(s) {humanize_list(invalid)} are invalid.")
        return styles

    @classmethod
    def get_color(cls, color=None, level=None):
        if color is not None:
            if not hasattr(cls, color.upper()):
                raise LookupError(f"Invalid color {color} provided.")
            return getattr(cls, color.upper())
        elif level is not None:
            if level.lower() not in cls.LEVEL_COLOR_MAP:
                raise LookupError(f"Invalid level {level} provided.")
            return cls.LEVEL_COLOR_MAP[level.lower()]
        return None

    @classmethod
    def style(cls, text, color=None, level=None, style=None, bold=empty):
        color = cls.get_color(color=color, level=level)
        if color is not None:
            text = color + text
        if cls.BOLD_STYLE in cls.get_styles(style=style, bold=bold):
            text = cls.BOLD + text
        return text + cls.END

    @classmethod
    def message(cls, text, prefix=None, color=None, level=None, style=None,
            bold=empty):
        text = cls.style(text, color=color, level=level, style=style,
            bold=bold)
        if prefix is None:
            return text
        prefix = prefix if prefix.endswith(":") else f"{prefix}:"
        prefix = cls.style(prefix, color=color, level=level, bold=True)
        return f"{prefix} {text}"


class MessageFn:
    """
    A message channel that styles text through :obj:`Terminal` and prints it
    to stderr with :obj:`click.echo`.  Calling the channel without a message
    returns a new channel with the provided styling merged in:

    >>> stdout.warning("Duplicate key(s) 1 collapsed.")
    >>> stdout.warning(prefix="Caution")("Duplicate key(s) 1 collapsed.")
    """
    def __init__(self, **kwargs):
        self._kwargs = kwargs

    def __call__(self, *args, **kwargs):
        display = kwargs.pop('display', True)
        options = {**self._kwargs, **kwargs}
        if not args:
            return self.__class__(**options)
        elif len(args) != 1 or not isinstance(args[0], str):
            raise TypeError(
                f"{self.__class__.__name__} expects a single string message.")
        data = Terminal.message(args[0], **options)
        if display:
            # click strips the styling when stderr is not a terminal.
            click.echo(data, err=True)
        return data

    def format(self, message, **kwargs):
        if 'display' in kwargs:
            raise TypeError(
                "The `display` parameter is redundant for this method.")
        return self(message, display=False, **kwargs)


class stdout:
    info = MessageFn(level="info")
    warning = MessageFn(level="warning", prefix="Warning")
    error = MessageFn(level="error", prefix="Error")
    log = warning
