"""Console UI for sutja application."""

import time

from core.config import NATIVE, SINO, KOREAN_TO_ENGLISH, ENGLISH_TO_KOREAN

SYSTEM_NAMES = {NATIVE: 'Native Korean', SINO: 'Sino-Korean'}
DIRECTION_NAMES = {KOREAN_TO_ENGLISH: 'Korean → English', ENGLISH_TO_KOREAN: 'English → Korean'}


class ConsoleUI:
    """Console user interface for sutja application."""

    def __init__(self, client, input_func=input, sleep=time.sleep):
        self.client = client
        self.input = input_func
        self.sleep = sleep

    def print_question(self, question: dict):
        """Print the prompt for a question."""
        if question['direction'] == KOREAN_TO_ENGLISH:
            hint = 'Type the number in digits'
        else:
            hint = f"Type it in {SYSTEM_NAMES[question['number_system']]}"
        print(f"\n>>> {question['prompt']}    ({hint})")

    def print_result(self, result: dict):
        """Print the outcome of an answer."""
        if result['is_correct']:
            print('✓ Correct!')
        else:
            print(f"✗ Incorrect. The answer is: {result['expected']}")
        score = result['score']
        print(f"Score: {score['display']} ({score['percentage']}%)")

    def print_settings(self, settings: dict):
        print(f"System: {SYSTEM_NAMES[settings['number_system']]} (0-{settings['max_number']})")
        print(f"Direction: {DIRECTION_NAMES[settings['direction']]}")
        print(f"Range: {settings['effective_min']}-{settings['effective_max']}")

    def print_status(self, status: dict):
        """Print score and settings."""
        print('\n' + '=' * 40)
        print('STATUS')
        print('=' * 40)
        score = status['score']
        print(f"Score: {score['display']} ({score['percentage']}%)")
        self.print_settings(status['settings'])
        print('=' * 40 + '\n')

    def _ask(self, label: str, current) -> str:
        value = self.input(f'{label} [{current}]: ').strip()
        return value or None

    def change_settings(self) -> dict:
        """Prompt for new settings; blank input keeps the current value."""
        current = self.client.get_settings()
        system = self._ask(f'Number system ({NATIVE}/{SINO})', current['number_system'])
        if system not in (None, NATIVE, SINO):
            print(f'Unknown number system "{system}", keeping {current["number_system"]}')
            system = None
        direction = self._ask(f'Direction ({KOREAN_TO_ENGLISH}/{ENGLISH_TO_KOREAN})', current['direction'])
        if direction not in (None, KOREAN_TO_ENGLISH, ENGLISH_TO_KOREAN):
            print(f'Unknown direction "{direction}", keeping {current["direction"]}')
            direction = None
        min_range = self._ask('Minimum', current['min_range'])
        max_range = self._ask('Maximum', current['max_range'])
        settings = self.client.update_settings(
            number_system=system, direction=direction,
            min_range=min_range, max_range=max_range
        )
        print('Settings applied.')
        self.print_settings(settings)
        return settings

    def advance(self, round_id: int) -> dict | None:
        """Ask for the next question. Returns None if the request failed."""
        try:
            return self.client.next_question(round_id)
        except Exception as e:
            print(f"Error getting next question: {e}")
            return None

    def answer_loop(self, question: dict) -> bool:
        """Ask one question until it is answered. Returns False when the user exits."""
        self.print_question(question)
        while True:
            user_input = self.input('==> ').strip()
            command = user_input.lower()

            if command == 'exit':
                print('Goodbye!')
                return False

            elif command == 'status':
                try:
                    self.print_status(self.client.get_status())
                except Exception as e:
                    print(f"Error getting status: {e}")
                self.print_question(question)

            elif command == 'settings':
                try:
                    self.change_settings()
                except Exception as e:
                    print(f"Error applying settings: {e}")
                return True

            elif command == 'next':
                self.advance(question['round_id'])
                return True

            elif user_input == '':
                self.print_question(question)

            else:
                break

        try:
            result = self.client.submit_answer(user_input, question['round_id'])
        except Exception as e:
            print(f"Error submitting answer: {e}")
            return True

        self.print_result(result)
        if result['auto_advance']:
            self.sleep(result['advance_delay_ms'] / 1000)
        else:
            reply = self.input('Press Enter for the next question...').strip().lower()
            if reply == 'exit':
                print('Goodbye!')
                return False
        self.advance(result['round_id'])
        return True

    def run(self):
        """Run the main application loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to {health['service']}")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py (or use --local)")
            return

        status = self.client.get_status()
        print('\nKorean number practice!')
        self.print_settings(status['settings'])
        print('Commands: "next" to skip, "status" for score, "settings" to change, "exit" to quit\n')

        while True:
            try:
                question = self.client.get_question()
            except Exception as e:
                print(f"Error getting question: {e}")
                return
            if question['answered']:
                question = self.advance(question['round_id'])
                if question is None:
                    return
            if not self.answer_loop(question):
                return
