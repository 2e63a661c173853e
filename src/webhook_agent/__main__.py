from webhook_agent.cli.app import app

app(prog_name="webhook-agent")
