"""
Magazine Scan Combiner - Library API Usage Examples

This script demonstrates how to use the scan combiner library programmatically.
"""

from scan_combiner import (
    CombineOperation,
    OperationState,
    Progress,
    combine_scans,
    __version__
)


def example_1_basic_combine():
    """Example 1: Combine two scans synchronously"""
    print("\n=== Example 1: Basic Combine ===")

    # Note: You need two scanned PDFs to run this example
    # Uncomment and modify the paths below:

    # result = combine_scans('fronts.pdf', 'backs.pdf', 'magazine.pdf')
    # print(f"Wrote {result.pages_written} pages")

    print("Code example:")
    print("""
    result = combine_scans('fronts.pdf', 'backs.pdf', 'magazine.pdf')
    print(f"Wrote {result.pages_written} pages")
    """)


def example_2_progress_callback():
    """Example 2: Report progress"""
    print("\n=== Example 2: Progress Callback ===")

    print("Code example:")
    print("""
    def on_page(completed, total):
        print(f"{completed}/{total}")

    combine_scans('fronts.pdf', 'backs.pdf', 'magazine.pdf', progress_callback=on_page)
    """)


def example_3_background_and_cancel():
    """Example 3: Run in the background and cancel"""
    print("\n=== Example 3: Background Run With Cancellation ===")

    print("Code example:")
    print("""
    operation = CombineOperation('fronts.pdf', 'backs.pdf', 'magazine.pdf')
    future = operation.start_in_background()

    # Later, e.g. from a UI thread
    print(f"{operation.progress.fraction_completed:.0%} done")
    operation.cancel()

    result = future.result()
    if result.state is OperationState.CANCELED:
        print("Canceled; partial output removed")
    """)


def example_4_error_handling():
    """Example 4: Error handling"""
    print("\n=== Example 4: Error Handling ===")

    print("Code example:")
    print("""
    from scan_combiner import OpenFailedError, CreateFailedError

    try:
        combine_scans('fronts.pdf', 'backs.pdf', '/read-only/magazine.pdf')
    except OpenFailedError as e:
        print(f"Could not open {e.location}")
    except CreateFailedError as e:
        print(f"Could not create {e.location}")
    """)


def example_5_shared_progress():
    """Example 5: Share a Progress object"""
    print("\n=== Example 5: Shared Progress ===")

    progress = Progress()
    print(f"Initial progress: {progress}")
    print("Code example:")
    print("""
    progress = Progress()
    operation = CombineOperation('fronts.pdf', 'backs.pdf', 'out.pdf', progress=progress)
    operation.start()
    assert operation.state is OperationState.SUCCEEDED
    """)


def main():
    """Run all examples"""
    print("=" * 60)
    print(f"Magazine Scan Combiner Library - API Examples (v{__version__})")
    print("=" * 60)

    example_1_basic_combine()
    example_2_progress_callback()
    example_3_background_and_cancel()
    example_4_error_handling()
    example_5_shared_progress()

    print("\n" + "=" * 60)
    print("For more information, see the README.md file")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
