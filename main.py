# =============================================================================
# main.py  -  Interactive RestCSV assistant
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (RESTCSV_API_KEY, OPENROUTER_API_KEY, ...)
#   2. Creates the ADK agent (agent/csv_agent.py), which spawns the RestCSV
#      MCP server over stdio
#   3. Reads questions from the terminal and streams the agent's answers,
#      printing each tool the agent calls
#
# The MCP server itself does not need this file; see tools/mcp_server.py.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm reads its provider key and
# create_agent() forwards RESTCSV_* to the server subprocess at creation time.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.csv_agent import create_agent

APP_NAME = "restcsv_assistant"
USER_ID = "local_user"


async def run_agent():
    """Run the assistant until the user quits."""
    print("=" * 70)
    print("  RESTCSV ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about your CSVs, rows, actions or webhooks.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
