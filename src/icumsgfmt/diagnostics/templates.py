"""Constructors for every Diagnostic the library emits.

Message wording lives only here, so tests can assert on it and raise
sites stay one line long.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Namespace of static Diagnostic factories, one per DiagnosticCode.

    Raise sites pass a ready Diagnostic to the exception instead of
    formatting text themselves:

        raise PatternSyntaxError(ErrorTemplate.unknown_block_type(text))
    """

    # ICU user guide, MessageFormat chapter
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    @staticmethod
    def unmatched_close_brace(span: SourceSpan) -> Diagnostic:
        """Closing brace with no open block.

        Args:
            span: Location of the stray '}'

        Returns:
            Diagnostic for UNMATCHED_CLOSE_BRACE
        """
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_CLOSE_BRACE,
            message="No matching { for }",
            span=span,
            hint="Remove the '}' or quote it as '}' to emit it literally",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#quotingescaping",
        )

    @staticmethod
    def unbalanced_braces(span: SourceSpan) -> Diagnostic:
        """Block opened but never closed.

        Args:
            span: Location of the outermost unclosed '{'

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message="There are mismatched { or } in the pattern",
            span=span,
            hint="Close every '{' with a matching '}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#quotingescaping",
        )

    @staticmethod
    def unknown_block_type(block: str) -> Diagnostic:
        """Block header matches no known argument syntax.

        Args:
            block: Block contents (braces excluded)

        Returns:
            Diagnostic for UNKNOWN_BLOCK_TYPE
        """
        msg = f"Unknown block type for pattern '{block}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_BLOCK_TYPE,
            message=msg,
            hint="Use {NAME}, {NAME, select, ...}, {NAME, plural, ...} "
            "or {NAME, selectordinal, ...}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#message-format-pattern-syntax",
            snippet=block,
        )

    @staticmethod
    def missing_choice_value(kind: str, argument_name: str, key: str) -> Diagnostic:
        """Choice key not followed by a {...} sub-pattern.

        Args:
            kind: Choice kind (select, plural, selectordinal)
            argument_name: Argument the choice selects on
            key: The dangling key text

        Returns:
            Diagnostic for MISSING_CHOICE_VALUE
        """
        msg = f"Missing or invalid {kind} value element for key '{key.strip()}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_CHOICE_VALUE,
            message=msg,
            hint="Every key must be followed by a {...} sub-pattern",
            argument_name=argument_name,
            snippet=key,
        )

    @staticmethod
    def invalid_choice_key(kind: str, argument_name: str, key: str) -> Diagnostic:
        """Choice key is empty, contains whitespace, or is missing.

        Args:
            kind: Choice kind (select, plural, selectordinal)
            argument_name: Argument the choice selects on
            key: The offending key text

        Returns:
            Diagnostic for INVALID_CHOICE_KEY
        """
        msg = f"Invalid {kind} key '{key.strip()}' in block '{argument_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHOICE_KEY,
            message=msg,
            hint="Keys are single words or =N exact values, e.g. 'one', 'male', '=0'",
            argument_name=argument_name,
            snippet=key,
        )

    @staticmethod
    def missing_other_option(kind: str, argument_name: str) -> Diagnostic:
        """Choice block declares no 'other' option.

        Args:
            kind: Choice kind (select, plural, selectordinal)
            argument_name: Argument the choice selects on

        Returns:
            Diagnostic for MISSING_OTHER_OPTION
        """
        msg = f"Missing other key in {kind} statement '{argument_name}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_OPTION,
            message=msg,
            hint="Add an 'other {...}' branch; it is used when no key matches",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#complex-argument-types",
            argument_name=argument_name,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Pattern nests blocks deeper than the configured limit.

        Args:
            max_depth: Maximum allowed nesting depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested choice blocks or raise max_nesting_depth",
        )

    @staticmethod
    def marker_in_pattern(span: SourceSpan) -> Diagnostic:
        """Pattern contains the reserved literal placeholder marker.

        Args:
            span: Location of the marker character

        Returns:
            Diagnostic for MARKER_IN_PATTERN
        """
        return Diagnostic(
            code=DiagnosticCode.MARKER_IN_PATTERN,
            message="Pattern contains reserved character U+FDDF",
            span=span,
            hint="U+FDDF is a Unicode noncharacter reserved for internal placeholders",
        )

    @staticmethod
    def unreplaced_pound() -> Diagnostic:
        """'#' remained after rendering outside plural/selectordinal scope.

        Returns:
            Diagnostic for UNREPLACED_POUND
        """
        return Diagnostic(
            code=DiagnosticCode.UNREPLACED_POUND,
            message="Not all # were replaced",
            hint="'#' is only meaningful inside plural/selectordinal branches; "
            "quote it as '#' to emit it literally",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#quotingescaping",
        )

    @staticmethod
    def expression_depth_exceeded(max_depth: int) -> Diagnostic:
        """Rendering recursed deeper than the configured limit.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum render depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="The pattern tree is nested too deeply",
        )

    @staticmethod
    def formatting_failed(value: object, locale_code: str, reason: str) -> Diagnostic:
        """Locale-aware number formatting failed.

        Args:
            value: Value that could not be formatted
            locale_code: Locale used for formatting
            reason: Underlying failure description

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Number formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            hint="Pass a finite int, float or Decimal",
        )
