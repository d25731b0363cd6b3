"""Installation instructions written next to a freshly generated certificate."""

README_TEMPLATE = """\
# Self Signed Certs

These files are used for hosting a local https server. You may visit {project_url}
in your browser directly, but you will probably get a security warning. You can
dismiss the warning but this will likely still disable some browser features.
To fix this, you have to make your browser trust the certificate.

# Chrome and Safari

On macOS you can do this by adding selfsigned.crt to your keychain:
	- Double click selfsigned.crt to add it to the macOS keychain
	- Open Keychain Access and find '{name}' under System Keychains -> System -> Certificates (tab)
	- Double click '{name}' and open the 'trust' section
	- Set 'Secure Sockets Layer (SSL)' to 'always trust'
	- Make sure to close the window and enter your password for the changes to take effect
	- If you have already visited the page, you may need to restart your browser.

# Firefox

Firefox doesn't automatically trust system certificates unfortunately.
But so far it seems like dismissing the security warning on {project_url}
adds a security exception which is remembered even after restarting the browser.
"""


def render_readme(name: str, project_url: str) -> str:
    """Fill the readme template with the certificate name and project URL."""
    return README_TEMPLATE.format(name=name, project_url=project_url)
