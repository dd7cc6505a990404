"""Shell completion scripts generated from the argument parser."""

import argparse
from dataclasses import dataclass, field
from typing import List, Optional

SUPPORTED_SHELLS = ("bash", "zsh", "fish")


@dataclass
class OptionSpec:
    flags: List[str]
    help: str = ""
    takes_value: bool = False


@dataclass
class PositionalSpec:
    name: str
    help: str = ""
    choices: List[str] = field(default_factory=list)
    is_file: bool = False


@dataclass
class CommandSpec:
    name: str
    help: str = ""
    options: List[OptionSpec] = field(default_factory=list)
    positionals: List[PositionalSpec] = field(default_factory=list)


def _subparsers_action(parser: argparse.ArgumentParser) -> Optional[argparse._SubParsersAction]:
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action
    return None


def _options(parser: argparse.ArgumentParser) -> List[OptionSpec]:
    options = []
    for action in parser._actions:
        if not action.option_strings or action.help == argparse.SUPPRESS:
            continue
        options.append(OptionSpec(
            flags=list(action.option_strings),
            help=action.help or "",
            takes_value=action.nargs != 0,
        ))
    return options


def _positionals(parser: argparse.ArgumentParser) -> List[PositionalSpec]:
    positionals = []
    for action in parser._actions:
        if action.option_strings or isinstance(action, argparse._SubParsersAction):
            continue
        positionals.append(PositionalSpec(
            name=action.dest,
            help=action.help or "",
            choices=[str(c) for c in action.choices] if action.choices else [],
            is_file=action.metavar == "FILE",
        ))
    return positionals


def describe_parser(parser: argparse.ArgumentParser) -> tuple[List[OptionSpec], List[CommandSpec]]:
    """Global options and one spec per subcommand."""
    subparsers = _subparsers_action(parser)
    commands = []

    if subparsers is not None:
        helps = {choice.dest: choice.help or "" for choice in subparsers._choices_actions}
        for name, subparser in subparsers.choices.items():
            commands.append(CommandSpec(
                name=name,
                help=helps.get(name, ""),
                options=_options(subparser),
                positionals=_positionals(subparser),
            ))

    return _options(parser), commands


## Renderers


def _single_quote(text: str) -> str:
    return text.replace("'", "'\\''")


def render_bash(prog: str, global_options: List[OptionSpec], commands: List[CommandSpec]) -> str:
    func = f"_{prog.replace('-', '_')}"
    top_words = " ".join([c.name for c in commands] + [f for o in global_options for f in o.flags])

    lines = [
        f"# bash completion for {prog}",
        f"{func}() {{",
        "    local cur cmd i",
        "    COMPREPLY=()",
        '    cur="${COMP_WORDS[COMP_CWORD]}"',
        '    cmd=""',
        "    for (( i=1; i < COMP_CWORD; i++ )); do",
        '        if [[ "${COMP_WORDS[i]}" != -* ]]; then',
        '            cmd="${COMP_WORDS[i]}"',
        "            break",
        "        fi",
        "    done",
        "",
        '    if [[ -z "${cmd}" ]]; then',
        f'        COMPREPLY=( $(compgen -W "{top_words}" -- "${{cur}}") )',
        "        return 0",
        "    fi",
        "",
        '    case "${cmd}" in',
    ]

    for command in commands:
        words = [f for o in command.options for f in o.flags]
        for positional in command.positionals:
            words.extend(positional.choices)
        has_file = any(p.is_file for p in command.positionals)
        lines.append(f"        {command.name})")
        if has_file:
            lines.append('            if [[ "${cur}" != -* ]]; then')
            lines.append('                COMPREPLY=( $(compgen -f -- "${cur}") )')
            lines.append("                return 0")
            lines.append("            fi")
        lines.append(f'            COMPREPLY=( $(compgen -W "{" ".join(words)}" -- "${{cur}}") )')
        lines.append("            ;;")

    lines += [
        "    esac",
        "    return 0",
        "}",
        f"complete -F {func} {prog}",
        "",
    ]
    return "\n".join(lines)


def _zsh_escape(text: str) -> str:
    return (
        _single_quote(text)
        .replace("[", "\\[")
        .replace("]", "\\]")
        .replace(":", "\\:")
    )


def _zsh_option(option: OptionSpec) -> List[str]:
    suffix = ":value:" if option.takes_value else ""
    description = _zsh_escape(option.help)
    if len(option.flags) == 1:
        return [f"'{option.flags[0]}[{description}]{suffix}'"]
    exclusion = " ".join(option.flags)
    braces = ",".join(option.flags)
    return [f"'({exclusion})'{{{braces}}}'[{description}]{suffix}'"]


def render_zsh(prog: str, global_options: List[OptionSpec], commands: List[CommandSpec]) -> str:
    func = f"_{prog.replace('-', '_')}"
    lines = [
        f"#compdef {prog}",
        "",
        f"{func}() {{",
        "    local -a commands",
        "    commands=(",
    ]
    for command in commands:
        lines.append(f"        '{command.name}:{_zsh_escape(command.help)}'")
    lines += [
        "    )",
        "",
        "    _arguments -C \\",
    ]
    for option in global_options:
        for spec in _zsh_option(option):
            lines.append(f"        {spec} \\")
    lines += [
        "        '1: :->command' \\",
        "        '*:: :->args'",
        "",
        "    case $state in",
        "        command)",
        "            _describe 'command' commands",
        "            ;;",
        "        args)",
        "            case $words[1] in",
    ]

    for command in commands:
        specs = []
        for option in command.options:
            specs.extend(_zsh_option(option))
        for position, positional in enumerate(command.positionals, start=1):
            if positional.is_file:
                action = "_files"
            elif positional.choices:
                action = f"({' '.join(positional.choices)})"
            else:
                action = ""
            specs.append(f"'{position}:{positional.name}:{action}'")
        lines.append(f"                {command.name})")
        if specs:
            lines.append("                    _arguments \\")
            for spec in specs[:-1]:
                lines.append(f"                        {spec} \\")
            lines.append(f"                        {specs[-1]}")
        lines.append("                    ;;")

    lines += [
        "            esac",
        "            ;;",
        "    esac",
        "}",
        "",
        f'{func} "$@"',
        "",
    ]
    return "\n".join(lines)


def render_fish(prog: str, global_options: List[OptionSpec], commands: List[CommandSpec]) -> str:
    lines = [
        f"# fish completion for {prog}",
        f"complete -c {prog} -f",
    ]

    def option_line(condition: str, option: OptionSpec) -> str:
        parts = [f"complete -c {prog}"]
        if condition:
            parts.append(f"-n '{condition}'")
        for flag in option.flags:
            if flag.startswith("--"):
                parts.append(f"-l {flag[2:]}")
            else:
                parts.append(f"-s {flag[1:]}")
        if option.takes_value:
            parts.append("-r")
        if option.help:
            parts.append(f"-d '{_single_quote(option.help)}'")
        return " ".join(parts)

    for option in global_options:
        lines.append(option_line("__fish_use_subcommand", option))

    for command in commands:
        lines.append(
            f"complete -c {prog} -n '__fish_use_subcommand' -a {command.name} "
            f"-d '{_single_quote(command.help)}'"
        )

    for command in commands:
        condition = f"__fish_seen_subcommand_from {command.name}"
        for option in command.options:
            lines.append(option_line(condition, option))
        for positional in command.positionals:
            if positional.is_file:
                lines.append(f"complete -c {prog} -n '{condition}' -F")
            elif positional.choices:
                lines.append(
                    f"complete -c {prog} -n '{condition}' -a '{' '.join(positional.choices)}'"
                )

    lines.append("")
    return "\n".join(lines)


RENDERERS = {
    "bash": render_bash,
    "zsh": render_zsh,
    "fish": render_fish,
}


def generate_completion(parser: argparse.ArgumentParser, shell: str) -> str:
    """Completion script for ``shell`` describing ``parser``."""
    if shell not in RENDERERS:
        raise ValueError(
            f"Unsupported shell: {shell} (choose from {', '.join(SUPPORTED_SHELLS)})"
        )
    global_options, commands = describe_parser(parser)
    return RENDERERS[shell](parser.prog, global_options, commands)
