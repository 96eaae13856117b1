"""Textual front end for CryptoLab.

Start here with `python -m cryptolab.frontend.cli.app`

The app holds no cryptographic logic: every button hands strings to
:class:`cryptolab.core.toolkit.CryptoToolkit` in a thread worker and renders
whatever comes back.
"""

from __future__ import annotations

import logging
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Select,
    Static,
    TabbedContent,
    TabPane,
    TextArea,
)

from cryptolab.core.catalog import (
    ENCRYPTION_EXAMPLES,
    HASH_ALGORITHMS,
    SymmetricAlgorithm,
)
from cryptolab.core.config import RSA_MODULUS_BITS
from cryptolab.core.exceptions import CryptoLabError
from cryptolab.core.hashing import compare_digests
from cryptolab.core.models import (
    DecryptionSuccess,
    KeyStrengthScore,
    StrengthLevel,
)
from cryptolab.frontend.cli.clipboard import clipboard_text, copy_to_clipboard
from cryptolab.frontend.cli.context import AppContext, build_context
from cryptolab.frontend.cli.logging_config import configure_logging

logger = logging.getLogger(__name__)

_LEVEL_STYLE = {
    StrengthLevel.WEAK: "red",
    StrengthLevel.MEDIUM: "yellow",
    StrengthLevel.STRONG: "green",
    StrengthLevel.VERY_STRONG: "bold green",
}


def _hash_options() -> list[tuple[str, str]]:
    # Deprecated digests stay selectable but are labelled as not secure.
    options = []
    for info in HASH_ALGORITHMS:
        label = f"{info.name} (not secure)" if info.deprecated else info.name
        options.append((label, info.id))
    return options


def _aes_options() -> list[tuple[str, int]]:
    return [(algo.label, algo.key_bits) for algo in reversed(list(SymmetricAlgorithm))]


def _rsa_options() -> list[tuple[str, int]]:
    return [(f"RSA-{bits}", bits) for bits in RSA_MODULUS_BITS]


def _strength_markup(score: KeyStrengthScore) -> str:
    style = _LEVEL_STYLE[score.level]
    bar = "█" * score.score + "░" * (7 - score.score)
    return f"[{style}]{score.level.value}[/] {bar} {score.feedback}"


# === App ===


class CryptoLabApp(App):
    """Tabs for encryption, hashing and signatures."""

    TITLE = "CryptoLab"

    CSS = """
    TextArea { height: 6; }
    .row { height: auto; }
    .row > * { margin-right: 1; }
    #status { padding: 0 1; height: 2; color: $text-muted; }
    .section-label { padding: 1 0 0 0; color: $text-muted; }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("c", "copy_result", "Copy Result"),
        ("x", "load_example", "Example"),
        ("k", "forget_keys", "Forget RSA Keys"),
    ]

    def __init__(self, ctx: AppContext | None = None):
        self.ctx = ctx or build_context()
        super().__init__()
        self.status: Static | None = None
        # Last result object shown, used by the copy action
        self.last_result = None

    def compose(self) -> ComposeResult:  # pragma: no cover - UI only
        yield Header(show_clock=True)
        with TabbedContent(id="tabs"):
            with TabPane("Encrypt / Decrypt", id="tab-cipher"):
                with VerticalScroll():
                    with Horizontal(classes="row"):
                        yield Select(
                            [("AES-GCM (password)", "aes"), ("RSA-OAEP (key pair)", "rsa")],
                            value="aes",
                            allow_blank=False,
                            id="method",
                        )
                        yield Select(
                            _aes_options(),
                            value=self.ctx.settings.default_key_bits,
                            allow_blank=False,
                            id="aes-bits",
                        )
                        yield Select(
                            _rsa_options(),
                            value=self.ctx.settings.default_modulus_bits,
                            allow_blank=False,
                            id="rsa-bits",
                        )
                    yield Input(placeholder="Password (AES)", password=True, id="password")
                    yield Static("", id="strength")
                    yield Label("Input (plain text to encrypt, or encrypted text)", classes="section-label")
                    yield TextArea(id="cipher-input")
                    yield Label("RSA public key (encrypt) - left empty, a new pair is generated", classes="section-label")
                    yield TextArea(id="rsa-public")
                    yield Label("RSA private key (decrypt)", classes="section-label")
                    yield TextArea(id="rsa-private")
                    with Horizontal(classes="row"):
                        yield Button("Encrypt", id="encrypt-btn", variant="primary")
                        yield Button("Decrypt", id="decrypt-btn")
                    yield Label("Output", classes="section-label")
                    yield TextArea(id="cipher-output", read_only=True)
            with TabPane("Hash", id="tab-hash"):
                with VerticalScroll():
                    yield Select(_hash_options(), value="SHA-256", allow_blank=False, id="hash-algo")
                    yield TextArea(id="hash-input")
                    yield Input(placeholder="Digest to compare (optional)", id="hash-compare")
                    yield Button("Hash", id="hash-btn", variant="primary")
                    yield TextArea(id="hash-output", read_only=True)
                    yield Label("PBKDF2-SHA256 password hash", classes="section-label")
                    with Horizontal(classes="row"):
                        yield Input(placeholder="Password", password=True, id="stretch-password")
                        yield Input(placeholder="Salt (blank: random)", id="stretch-salt")
                        yield Input(
                            value=str(self.ctx.settings.stretch_iterations),
                            placeholder="Iterations",
                            type="integer",
                            id="stretch-iterations",
                        )
                        yield Button("Stretch", id="stretch-btn")
                    yield TextArea(id="stretch-output", read_only=True)
            with TabPane("Sign / Verify", id="tab-sign"):
                with VerticalScroll():
                    yield Label("Message", classes="section-label")
                    yield TextArea(id="sign-message")
                    yield Label("Signature (base64)", classes="section-label")
                    yield TextArea(id="sign-signature")
                    yield Label("Signer public key", classes="section-label")
                    yield TextArea(id="sign-public-key")
                    with Horizontal(classes="row"):
                        yield Button("Sign (new key pair)", id="sign-btn", variant="primary")
                        yield Button("Verify", id="verify-btn")
                    yield Static("", id="sign-output")
        self.status = Static("", id="status")
        yield self.status
        yield Footer()

    # === Helpers ===

    def _set_status(self, text: str) -> None:
        if self.status is not None:
            self.status.update(text)

    def _text(self, selector: str) -> str:  # pragma: no cover - UI only
        return self.query_one(selector, TextArea).text

    def _show(self, selector: str, text: str) -> None:  # pragma: no cover - UI only
        self.query_one(selector, TextArea).load_text(text)

    # === Workers (run in threads; return plain dicts) ===

    def _encrypt_worker(
        self,
        text: str,
        method: str,
        password: str,
        key_bits: int,
        public_key_pem: Optional[str],
    ) -> dict:
        try:
            outcome = self.ctx.toolkit.encrypt(
                text,
                method,
                password=password,
                key_bits=key_bits,
                public_key_pem=public_key_pem or None,
            )
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        return {"success": True, "outcome": outcome}

    def _decrypt_worker(
        self,
        text: str,
        method: str,
        password: str,
        key_bits: int,
        private_key_pem: Optional[str],
    ) -> dict:
        try:
            result = self.ctx.toolkit.decrypt(
                text,
                method,
                password=password,
                key_bits=key_bits,
                private_key_pem=private_key_pem,
            )
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        if isinstance(result, DecryptionSuccess):
            return {"success": True, "decrypted": result.decrypted}
        return {"success": False, "error": result.error}

    def _hash_worker(self, text: str, algorithm: str, expected: str = "") -> dict:
        try:
            result = self.ctx.toolkit.hash(text, algorithm)
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        matches = None
        if expected.strip():
            matches = compare_digests(result.hash, expected.strip().lower())
        return {"success": True, "result": result, "matches": matches}

    def _stretch_worker(self, password: str, salt: str, iterations: str) -> dict:
        try:
            rounds = int(iterations) if iterations.strip() else None
        except ValueError:
            return {"success": False, "error": f"Iterations must be a whole number, got {iterations!r}"}
        try:
            result = self.ctx.toolkit.stretch(password, salt, rounds)
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        return {"success": True, "result": result}

    def _sign_worker(self, message: str, modulus_bits: int) -> dict:
        try:
            result = self.ctx.toolkit.sign(message, modulus_bits)
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        return {"success": True, "result": result}

    def _verify_worker(self, message: str, signature: str, public_key_pem: str) -> dict:
        try:
            valid = self.ctx.toolkit.verify(message, signature, public_key_pem)
        except CryptoLabError as e:
            return {"success": False, "error": str(e), "kind": e.kind}
        return {"success": True, "valid": valid}

    # === Event handlers ===

    @on(Input.Changed, "#password")
    def _on_password_changed(self, event: Input.Changed) -> None:  # pragma: no cover - UI only
        widget = self.query_one("#strength", Static)
        if not event.value:
            widget.update("")
            return
        widget.update(_strength_markup(self.ctx.toolkit.strength(event.value)))

    @on(Button.Pressed, "#encrypt-btn")
    def _on_encrypt(self) -> None:  # pragma: no cover - UI only
        method = self.query_one("#method", Select).value
        bits = self.query_one("#aes-bits" if method == "aes" else "#rsa-bits", Select).value
        public_pem = self._text("#rsa-public").strip() or self.ctx.rsa_public_key
        args = (
            self._text("#cipher-input"),
            method,
            self.query_one("#password", Input).value,
            bits,
            public_pem if method == "rsa" else None,
        )
        self._set_status("Encrypting...")
        self.run_worker(lambda: self._encrypt_worker(*args), name="encrypt_worker", thread=True)

    @on(Button.Pressed, "#decrypt-btn")
    def _on_decrypt(self) -> None:  # pragma: no cover - UI only
        method = self.query_one("#method", Select).value
        bits = self.query_one("#aes-bits", Select).value
        private_pem = self._text("#rsa-private").strip() or self.ctx.rsa_private_key
        args = (
            self._text("#cipher-input"),
            method,
            self.query_one("#password", Input).value,
            bits,
            private_pem if method == "rsa" else None,
        )
        self._set_status("Decrypting...")
        self.run_worker(lambda: self._decrypt_worker(*args), name="decrypt_worker", thread=True)

    @on(Button.Pressed, "#hash-btn")
    def _on_hash(self) -> None:  # pragma: no cover - UI only
        args = (
            self._text("#hash-input"),
            self.query_one("#hash-algo", Select).value,
            self.query_one("#hash-compare", Input).value,
        )
        self.run_worker(lambda: self._hash_worker(*args), name="hash_worker", thread=True)

    @on(Button.Pressed, "#stretch-btn")
    def _on_stretch(self) -> None:  # pragma: no cover - UI only
        args = (
            self.query_one("#stretch-password", Input).value,
            self.query_one("#stretch-salt", Input).value,
            self.query_one("#stretch-iterations", Input).value,
        )
        self._set_status("Stretching password...")
        self.run_worker(lambda: self._stretch_worker(*args), name="stretch_worker", thread=True)

    @on(Button.Pressed, "#sign-btn")
    def _on_sign(self) -> None:  # pragma: no cover - UI only
        message = self._text("#sign-message")
        bits = self.ctx.settings.default_modulus_bits
        self._set_status(f"Generating RSA-{bits} signing keys...")
        self.run_worker(lambda: self._sign_worker(message, bits), name="sign_worker", thread=True)

    @on(Button.Pressed, "#verify-btn")
    def _on_verify(self) -> None:  # pragma: no cover - UI only
        args = (
            self._text("#sign-message"),
            self._text("#sign-signature"),
            self._text("#sign-public-key"),
        )
        self.run_worker(lambda: self._verify_worker(*args), name="verify_worker", thread=True)

    def on_worker_state_changed(self, event) -> None:  # pragma: no cover - UI only
        """Handle worker completion to update UI."""
        if not event.worker.is_finished:
            return

        name = event.worker.name
        result = event.worker.result
        if result is None:
            self._set_status("Operation failed")
            return
        if not result["success"]:
            logger.debug("%s rejected: %s", name, result.get("kind"))
            self._set_status(f"[red]{result['error']}[/]")
            if name == "verify_worker":
                self.query_one("#sign-output", Static).update("")
            return

        if name == "encrypt_worker":
            outcome = result["outcome"]
            if outcome.generated_keys is not None:
                keys = outcome.generated_keys
                self.ctx.remember_rsa_keys(keys.public_key, keys.private_key)
                self._show("#rsa-public", keys.public_key)
                self._show("#rsa-private", keys.private_key)
            self.last_result = outcome.result
            self._show("#cipher-output", outcome.result.encrypted)
            self._set_status(f"Encrypted with {outcome.result.algorithm} at {outcome.result.timestamp}")
        elif name == "decrypt_worker":
            self.last_result = None
            self._show("#cipher-output", result["decrypted"])
            self._set_status("Decrypted")
        elif name == "hash_worker":
            digest = result["result"]
            self.last_result = digest
            self._show("#hash-output", digest.hash)
            status = f"{digest.algorithm}: {len(digest.hash) * 4} bits"
            if result["matches"] is not None:
                status += " - matches" if result["matches"] else " - does NOT match"
            self._set_status(status)
        elif name == "stretch_worker":
            stretched = result["result"]
            self.last_result = stretched
            self.query_one("#stretch-salt", Input).value = stretched.salt
            self._show("#stretch-output", stretched.hash)
            self._set_status(f"{stretched.algorithm}, {stretched.iterations:,} iterations")
        elif name == "sign_worker":
            signed = result["result"]
            self.last_result = signed
            self._show("#sign-signature", signed.signature)
            self._show("#sign-public-key", signed.public_key)
            self.query_one("#sign-output", Static).update("Signed. Share message, signature and public key.")
            self._set_status("Signature created")
        elif name == "verify_worker":
            text = "[green]Signature is valid[/]" if result["valid"] else "[red]Signature is NOT valid[/]"
            self.query_one("#sign-output", Static).update(text)
            self._set_status("Verification finished")

    # === Actions ===

    def action_copy_result(self) -> None:
        if self.last_result is None:
            self._set_status("Nothing to copy yet")
            return
        if copy_to_clipboard(clipboard_text(self.last_result)):
            self._set_status("Copied to clipboard")
        else:
            self._set_status("Clipboard is not available")

    def action_load_example(self) -> None:  # pragma: no cover - UI only
        self._show("#cipher-input", ENCRYPTION_EXAMPLES["plaintext"])
        self.query_one("#password", Input).value = ENCRYPTION_EXAMPLES["strong_password"]

    def action_forget_keys(self) -> None:
        self.ctx.forget_rsa_keys()
        self._set_status("RSA keys forgotten")


def main() -> None:
    """Run the CryptoLab Textual application."""
    ctx = build_context()
    configure_logging(ctx.settings.log_level, log_file="cryptolab.log")
    CryptoLabApp(ctx).run()


if __name__ == "__main__":  # pragma: no cover
    main()
