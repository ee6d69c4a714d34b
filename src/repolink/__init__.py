"""repolink: shareable web links to files in GitHub and Bitbucket repositories."""

__version__ = "0.1.0"
